# pdfepub

This package holds pure-Python building blocks for converting PDF documents into e-books.
It uses only the standard library.

## Modules

- `pdfepub.utils` has these helpers:
  - `compress` produces a raw deflate stream with no zlib header.
  - `flat_decode` inflates a zlib stream, as the FlateDecode filter needs. On corrupt data it reports an error and returns what it decoded up to that point.
  - `charset_to_utf8` decodes a PDF text string. A string longer than two bytes that starts with a byte order mark is read as UTF-16. Any other string is read as PDFDocEncoding.
  - `utf16be_to_utf8` decodes UTF-16BE. Malformed input gives an empty string.
  - `single_to_wide` turns each byte into the character with the same code.
  - Messages: `set_verbose_mode` and `verbose_mode` set and read the verbose switch. `verbose_message` prints to standard output only when verbose mode is on. `error_message` prints to standard error.
- `pdfepub.token` defines `TokenType` and the `Token` dataclass.
  - `Token.to_number` reads the leading number of the token text and returns `0.0` when there is none.
  - `Token.to_int` reads the leading integer. It returns `0` when there is none or when the value does not fit in 32 bits.
- The document model:
  - `pdfepub.document.Document` holds metadata, fonts, pages, page labels and the outline. Look up a font with `font(name)` and a page with `page_at(index)` or `page_by_id(id, generation)`. `lang` defaults to `"en"`.
  - `pdfepub.page.Page` holds the media box, the crop box and font aliases. `set_destination` sets the page's `link`, which has the form `section<id>_<generation>`.
  - `pdfepub.font.Font` holds style flags. A name that contains "Bold" marks the font bold. It also holds a code-to-Unicode map: `add_char_map` fills it and `translate` applies it.
  - `pdfepub.outline.Outline` is a bookmark tree. It is iterable and indexable over its children.
  - `pdfepub.pagelabel` defines `PageType` and the frozen `PageLabel`.
  - `pdfepub.context.Context` is the rendering state. `set_current_font` selects the font that a page alias names, and raises `KeyError` when no such font exists.
- `pdfepub.xmlwriter` builds XML tag by tag with `XmlDocument`, `XmlTag` and `Element`.
  - Text added with `add_element` has `&`, `<` and `>` escaped.
  - Attributes are written in sorted order.
- `pdfepub.appendedfile` defines `AppendedFile`, a queued archive entry. It carries the CRC-32, a DOS timestamp from `current_datetime()` and the deflated data.
- `pdfepub.ziparchive.ZipWriter` is a minimal ZIP writer.
  - It deflates an entry only when deflating makes it smaller. Otherwise it stores the entry as is.
  - The central directory is written on `close()`, which also runs when a `with` block exits.
  - Text passed to `add_source` is stored as UTF-8.
  - `add_source` raises `ValueError` when no file is open.

## Example

```python
from pdfepub.xmlwriter import XmlDocument
from pdfepub.ziparchive import ZipWriter

doc = XmlDocument()
doc.start_document("1.0", "UTF-8")
doc.start_tag("container")
doc.add_attribute("version", "1.0")
doc.add_element("hello & goodbye")
doc.end_tag()
doc.end_document()

with ZipWriter() as archive:
    archive.open("book.epub")
    archive.add_source("mimetype", b"application/epub+zip")
    archive.add_source("META-INF/container.xml", doc.content())
```

## What it does not do

This package does not read PDF files:
- It has no scanner or parser that turns a file into tokens and objects.
- It has no renderer that turns pages into HTML or e-book chapters.
- It has no command-line tool.

You have to fill the document model yourself. You then write the output with `XmlDocument` and `ZipWriter`.

## Running the tests

```
pip install -e .[test]
pytest
```