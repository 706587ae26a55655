"""Classic algorithms and data structures: number theory, graphs, strings, trees and geometry."""

__version__ = "0.1.0"