"""Document metadata from OLE property-set streams."""

from __future__ import annotations

import struct
import time
from typing import Dict, List, Tuple

_VT_I2 = 0x0002
_VT_LPSTR = 0x001E

_CODEPAGE_PROPERTY = 0x01

_FMTID_SUMMARY = "f29f85e0-4ff9-1068-ab91-08002b27b3d9"
_FMTID_DOC_SUMMARY = "d5cdd502-2e9c-101b-9397-08002b2cf9ae"

_PIDSI_TITLE = 0x02
_PIDSI_SUBJECT = 0x03
_PIDSI_AUTHOR = 0x04
_PIDSI_KEYWORDS = 0x05
_PIDSI_COMMENTS = 0x06
_PIDSI_TEMPLATE = 0x07

_PIDDSI_CATEGORY = 0x02
_PIDDSI_LINECOUNT = 0x05
_PIDDSI_LANGUAGE = 0x1C

# Seconds between 1601-01-01 and 1970-01-01.
_FILETIME_EPOCH_SECONDS = 11644473600


class EndOfStreamError(ValueError):
    """Raised when a read runs past the end of the data."""


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.pos = 0

    def seek(self, pos: int) -> None:
        self.pos = pos

    def skip(self, count: int) -> None:
        self.pos += count

    def _read(self, fmt: str):
        size = struct.calcsize(fmt)
        if self.pos < 0 or self.pos + size > len(self.data):
            raise EndOfStreamError(f"cannot read {size} bytes at offset {self.pos}")
        (value,) = struct.unpack_from(fmt, self.data, self.pos)
        self.pos += size
        return value

    def u8(self) -> int:
        return self._read("<B")

    def u16(self) -> int:
        return self._read("<H")

    def u32(self) -> int:
        return self._read("<I")

    def u64(self) -> int:
        return self._read("<Q")

    def take(self, count: int) -> bytes:
        if self.pos < 0 or self.pos + count > len(self.data):
            raise EndOfStreamError(f"cannot read {count} bytes at offset {self.pos}")
        chunk = self.data[self.pos:self.pos + count]
        self.pos += count
        return chunk


class MetaData:
    """Collects document properties such as title and author."""

    def __init__(self) -> None:
        self.ids_and_offsets: List[Tuple[int, int]] = []
        self.typed_property_values: Dict[int, int] = {}
        self.meta_data: Dict[str, str] = {}

    def parse(self, data: bytes | None) -> bool:
        """Read the first property set of a property-set stream."""
        if data is None:
            return False
        self._read_property_set_stream(_Reader(data))
        return True

    def _read_property_set_stream(self, reader: _Reader) -> None:
        # byte order, version, system identifier, CLSID, number of sets
        reader.skip(2 + 2 + 4 + 16 + 4)
        data1 = reader.u32()
        data2 = reader.u16()
        data3 = reader.u16()
        data4 = reader.take(8)
        fmtid = (
            f"{data1:08x}-{data2:04x}-{data3:04x}-{data4[0]:02x}{data4[1]:02x}-"
            + "".join(f"{b:02x}" for b in data4[2:])
        )
        offset = reader.u32()
        self._read_property_set(reader, offset, fmtid)

    def _read_property_set(self, reader: _Reader, offset: int, fmtid: str) -> None:
        reader.seek(offset)
        reader.skip(4)
        count = reader.u32()
        for _ in range(count):
            identifier = reader.u32()
            value_offset = reader.u32()
            self.ids_and_offsets.append((identifier, value_offset))
        for index in range(min(count, len(self.ids_and_offsets))):
            self._read_typed_property_value(
                reader, index, offset + self.ids_and_offsets[index][1], fmtid
            )

    def code_page(self) -> int:
        """The code page declared by the property set, or 0 if none is known."""
        for index, (identifier, _) in enumerate(self.ids_and_offsets):
            if identifier == _CODEPAGE_PROPERTY:
                if index >= len(self.typed_property_values):
                    break
                return self.typed_property_values.get(index, 0)
        return 0

    def _read_typed_property_value(
        self, reader: _Reader, index: int, offset: int, fmtid: str
    ) -> None:
        reader.seek(offset)
        value_type = reader.u16()
        reader.skip(2)
        if value_type == _VT_I2:
            self.typed_property_values[index] = reader.u16()
        elif value_type == _VT_LPSTR:
            text = self._read_code_page_string(reader)
            if not text or index >= len(self.ids_and_offsets):
                return
            identifier = self.ids_and_offsets[index][0]
            if fmtid == _FMTID_SUMMARY:
                self._store_summary(identifier, text)
            elif fmtid == _FMTID_DOC_SUMMARY:
                self._store_doc_summary(identifier, text)

    def _store_summary(self, identifier: int, text: str) -> None:
        if identifier == _PIDSI_TITLE:
            self.meta_data["dc:title"] = text
        elif identifier == _PIDSI_SUBJECT:
            self.meta_data["dc:subject"] = text
        elif identifier == _PIDSI_AUTHOR:
            self.meta_data["meta:initial-creator"] = text
            self.meta_data["dc:creator"] = text
        elif identifier == _PIDSI_KEYWORDS:
            self.meta_data["meta:keyword"] = text
        elif identifier == _PIDSI_COMMENTS:
            self.meta_data["dc:description"] = text
        elif identifier == _PIDSI_TEMPLATE:
            cut = max(text.rfind("/"), text.rfind("\\"))
            self.meta_data["librevenge:template"] = text[cut + 1:] if cut >= 0 else text

    def _store_doc_summary(self, identifier: int, text: str) -> None:
        if identifier == _PIDDSI_CATEGORY:
            self.meta_data["librevenge:category"] = text
        elif identifier == _PIDDSI_LINECOUNT:
            # the company name is stored under this identifier
            self.meta_data["librevenge:company"] = text
        elif identifier == _PIDDSI_LANGUAGE:
            self.meta_data["dc:language"] = text

    def _read_code_page_string(self, reader: _Reader) -> str:
        size = reader.u32()
        if size == 0:
            return ""
        raw = reader.take(size).split(b"\0", 1)[0]
        codepage = self.code_page()
        if codepage == 65001:
            return raw.decode("utf-8", errors="replace")
        if codepage == 1252:
            return raw.decode("cp1252", errors="replace")
        return ""

    def parse_times(self, data: bytes) -> bool:
        """Take the modification time of an OLE file's root entry as the document date."""
        reader = _Reader(data)
        reader.skip(30)
        sector_shift = reader.u16()
        reader.skip(16)
        first_dir_sector = reader.u32()
        sector_size = 2 ** sector_shift
        reader.seek((first_dir_sector + 1) * sector_size)
        reader.skip(108)
        modified = reader.u64()
        seconds = modified // 10_000_000 - _FILETIME_EPOCH_SECONDS
        try:
            local = time.localtime(seconds)
            result = time.strftime("%Y-%m-%dT%H:%M:%SZ", local)
        except (OverflowError, OSError, ValueError):
            return False
        self.meta_data["meta:creation-date"] = result
        self.meta_data["dc:date"] = result
        return True