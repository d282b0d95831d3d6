"""Symbol alphabet and field widths of the archive format."""

#: Number of distinct symbols: 256 byte values plus three control symbols.
LCHAR_RANGE = 259

#: Bit width of a symbol or a count in the archive header.
SIZE_OF_LCHAR = 9

#: Bit width of a single bit read from the payload.
SIZE_OF_BIT = 1

#: Bits in one byte.
SIZE_OF_CHAR = 8

#: Marks the end of a file name; the file's contents follow.
FILENAME_END = 256

#: Marks the end of a file's contents when another file follows.
ONE_MORE_FILE = 257

#: Marks the end of the archive.
ARCHIVE_END = 258