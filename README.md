# orchard-blockio

A small, read-only block I/O layer for looking at disk images and raw
devices. It classifies a target path, opens it for positional reads and
reads exact byte ranges. Every failure is raised as a `BlockIOError`
that carries an `ErrorCode`, a message and, where the operating system
gave one, a `system_code`.

It has no dependencies outside the standard library.

## Inspecting a target

```python
from orchard_blockio.inspection import inspect_target_path, TargetKind

info = inspect_target_path("disk.img")
print(info.kind, info.exists, info.size_bytes)
if info.kind is TargetKind.REGULAR_FILE:
    ...
```

`inspect_target_path` returns an `InspectionTargetInfo` whose `kind` is
one of `TargetKind.REGULAR_FILE`, `DIRECTORY`, `RAW_DEVICE`, `MISSING`
or `UNKNOWN`. A path that starts with `\\.\PhysicalDrive` or
`\\.\Volume{` (see `looks_like_raw_device_path`) is taken to be a raw
device without touching the file system. Regular files and raw devices
are marked as `probe_candidate`; for regular files `size_bytes` is
filled in. `str(kind)` gives a short name such as `"regular_file"`.

## Reading bytes

```python
from orchard_blockio.reader import open_reader, read_exact, ReadRequest

with open_reader("disk.img") as reader:
    print(reader.backend_name(), reader.size_bytes())
    superblock = read_exact(reader, ReadRequest(offset=0, size=4096))
```

`open_reader` takes either a path or an `InspectionTargetInfo` and
returns a `FileReader`. Missing paths raise `ErrorCode.NOT_FOUND`;
directories and unknown targets raise `ErrorCode.UNSUPPORTED_TARGET`.
Open failures map to `NOT_FOUND`, `ACCESS_DENIED` or `OPEN_FAILED`.

A regular file whose size cannot be queried is refused at open time. For
a raw device the size is found by seeking to the end; if that fails the
reader still opens, and `size_bytes()` raises `ErrorCode.IOCTL_FAILED`.

`Reader.read_at(offset, size)` may return fewer bytes than asked for,
and returns `b""` at or past the end. A negative offset raises
`ErrorCode.INVALID_ARGUMENT`, as does a single read larger than
4 GiB − 1 bytes on a `FileReader`. `read_exact` keeps calling `read_at`
until the request is filled; if the target runs out first it raises
`ErrorCode.SHORT_READ`.

Readers are context managers; leaving the `with` block calls `close()`.

### In-memory data

For tests, or for data that is already in memory, use
`make_memory_reader` (or `MemoryReader` directly):

```python
from orchard_blockio.reader import make_memory_reader, read_exact, ReadRequest

reader = make_memory_reader(b"NXSB....", "fixture")
assert read_exact(reader, ReadRequest(offset=0, size=4)) == b"NXSB"
```

A memory reader reports `backend_name()` as `"memory"`, its
`target_kind()` as `TargetKind.REGULAR_FILE`, and its label as `path()`.

Other byte sources can be plugged in by subclassing `Reader` and
implementing `size_bytes`, `read_at`, `backend_name`, `target_kind` and
`path`.

## Errors

```python
from orchard_blockio.errors import BlockIOError, ErrorCode
from orchard_blockio.reader import open_reader

try:
    open_reader("missing.img")
except BlockIOError as error:
    assert error.code is ErrorCode.NOT_FOUND
    print(str(error.code))  # "not_found"
```

## What this package does not do

It only reads bytes. It does not parse any file-system format, does not
list directories or files inside an image, does not mount anything and
has no command-line tool. It never writes to a target.