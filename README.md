# hsearchiver

A small command-line archiver.
It packs one or more files into a single archive using canonical Huffman coding.
It unpacks such an archive into the current directory.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

Compress files into an archive:

```
hsearchiver -c archive_name file1 [file2 ...]
```

The archive is written to `archive_name`. A relative name is taken from the current directory.
Only the base name of each input file is stored. Directory names are dropped.
If an input file does not exist, the command prints `"<path>" is not exist` and exits with status 111.
In that case no archive is written.

Unpack an archive:

```
hsearchiver -d archive_name
```

Every file in the archive is written into the current directory under its stored name.
An existing file with the same name is overwritten.
If `archive_name` is not an existing file, the command prints `<archive_name> is not exists` and exits with status 1.

Show help:

```
hsearchiver -h
```

Any other arguments also print the help text, and the command exits with status 111.

A successful compress or unpack run prints the time it took, as `TIME: <n> MS`, and exits with status 0.

The same command can be run as `python -m hsearchiver.cli`.

## Archive format

The archive is a bit stream. Each byte is written most significant bit first.
The alphabet has 259 symbols: the 256 byte values and three markers.
The markers are filename-end (256), next-file (257) and archive-end (258).

The stream holds, in order:

1. The alphabet size: the number of symbols that occur, as a 9-bit value.
2. Those symbols, as 9-bit values, sorted by code length and then by symbol value.
3. The number of codes of each length, from 1 up to the longest length, as 9-bit values.
4. The encoded data. For each file this is:
   - the bytes of its name;
   - a filename-end marker;
   - its contents;
   - a next-file marker, only if another file follows.
5. An archive-end marker.

The codes are canonical Huffman codes built from the byte counts of all names and contents.
Each marker is counted once. A symbol that occurs alone gets the code `0`.
After the archive-end marker, the last byte is padded with zero bits.
One final byte is always written, so an archive that already ends on a byte boundary gets an extra zero byte.

## Library use

The building blocks can be imported directly:

- `hsearchiver.encoder`
  - `encode(archive_path, input_paths)` writes an archive. It raises `FileNotFoundError` for a missing input.
  - `count_symbols(data, counts)` returns a new `Counter` with the bytes of `data` added to `counts`.
  - `canonicalize(codes)` turns a symbol-to-code mapping into ordered `(symbol, code)` pairs with canonical codes.
  - `code_length_counts(ordered)` returns the number of codes of each length.
- `hsearchiver.decoder`
  - `decode(stream, output_dir)` extracts an archive from a binary stream into `output_dir` and returns the paths it wrote.
  - `canonical_codes(symbols, length_counts)` rebuilds the code table from the header values.
- `hsearchiver.trie`
  - `build_huffman_codes(counts)` builds Huffman codes from counts.
  - `next_code(code)` returns the next binary code string.
  - `HuffmanNode` is a node of the Huffman tree.
  - `DecodingTrie` matches codes one bit at a time, with `feed`, `reset`, `is_terminal` and `symbol`.
- `hsearchiver.bitio`
  - `BitWriter` has `write(value, bits)`, `write_code(code)` and `flush()`.
  - `BitReader` has `read(bits)` and `bits()`.
- `hsearchiver.priority_queue`
  - `PriorityQueue` is a min-heap with `push`, `pop`, `peek` and `len()`. Items are ordered by `<` alone.

`hsearchiver.constants` holds the alphabet size, the field widths and the marker symbols.

## Limitations

- Directory trees are not archived; only the base names of regular files are stored.
- File permissions, timestamps and other metadata are not kept.
- An archive cannot be listed, appended to or partly extracted. Unpacking always extracts every file into the current directory.
- An archive carries no checksum. A damaged archive is not detected, apart from a truncated header, which raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```