"""Structured LDIF documents.

Documents are built as an ordered list of entries and include blocks, and
only serialized when handed to slapadd or shown to the operator. Entries,
attributes and values are written in the order they were added.
"""

import base64
import collections
import io
import logging

import ldif3

_LOGGER = logging.getLogger(__name__)

_COLS = 78


class _Writer(ldif3.LDIFWriter):
    """ldif3 writer keeping attribute order.

    Unsafe values (non-ASCII, leading space, colon or less-than) are base64
    encoded.
    """

    def _unparse_attr(self, attr_type, attr_value):
        if self._needs_base64_encoding(attr_type, attr_value):
            if not isinstance(attr_value, bytes):
                attr_value = attr_value.encode(self._encoding)
            line = ':: '.join(
                [attr_type, base64.b64encode(attr_value).decode('ascii')]
            )
        else:
            line = ': '.join([attr_type, attr_value])
        self._fold_line(line.encode('ascii'))

    def _unparse_entry_record(self, entry):
        for attr_type, attr_values in entry.items():
            for attr_value in attr_values:
                self._unparse_attr(attr_type, attr_value)


class Entry:
    """LDIF entry, attributes keep insertion order."""

    __slots__ = (
        'dn',
        'attrs',
    )

    def __init__(self, dn):
        self.dn = dn
        self.attrs = collections.OrderedDict()

    def add(self, attr, *values):
        """Append values to attribute, returns self for chaining."""
        self.attrs.setdefault(attr, []).extend(str(v) for v in values)
        return self

    def get(self, attr):
        """Return attribute values, empty list if not set."""
        return list(self.attrs.get(attr, []))

    def __repr__(self):
        return 'Entry(%r, %r)' % (self.dn, dict(self.attrs))


class Include:
    """Block of slapadd include: lines."""

    __slots__ = (
        'urls',
    )

    def __init__(self, urls):
        self.urls = list(urls)

    def __repr__(self):
        return 'Include(%r)' % self.urls


class Document:
    """Ordered LDIF document."""

    def __init__(self):
        self.items = []

    def entry(self, dn):
        """Append new entry and return it."""
        entry = Entry(dn)
        self.items.append(entry)
        return entry

    def include(self, urls):
        """Append include block."""
        block = Include(urls)
        self.items.append(block)
        return block

    @property
    def entries(self):
        """All entries, includes skipped."""
        return [item for item in self.items if isinstance(item, Entry)]

    def find(self, dn):
        """Find entry by DN, None if missing."""
        for entry in self.entries:
            if entry.dn == dn:
                return entry
        return None

    def write(self, stream):
        """Serialize document to binary stream."""
        writer = _Writer(stream, cols=_COLS)
        for item in self.items:
            if isinstance(item, Include):
                for url in item.urls:
                    stream.write('include: {}\n'.format(url).encode())
                stream.write(b'\n')
            else:
                writer.unparse(item.dn, item.attrs)

    def dumps(self):
        """Serialize document to text."""
        output_stream = io.BytesIO()
        self.write(output_stream)
        return output_stream.getvalue().decode()
