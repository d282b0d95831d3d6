"""Multi-file archiver based on canonical Huffman coding, with a command-line entry point."""

__version__ = "0.1.0"