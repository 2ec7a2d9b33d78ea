# dronemw

`dronemw` turns the occupied cells of a drone's occupancy map into compact
voxel packets and sends them as UDP datagrams.

Each cell becomes an 8-byte `Voxel`. A voxel holds a 30-bit Morton code for its
position and a `0x00RRGGBB` colour. The position uses 10 bits per axis at 5 cm
resolution, with the origin at cell 512. Voxels are queued in a bounded ring
buffer. From there they are packed into MTU-sized packets, and each packet
starts with an 8-byte header.

The package has no dependencies outside the standard library.

## Modules

- `dronemw.morton`
  - `encode_morton10(x, y, z)` interleaves the low 10 bits of each coordinate.
  - `decode_morton10(m)` returns the `(x, y, z)` tuple.
- `dronemw.voxel`
  - `Voxel(morton, rgb)` is a frozen dataclass. Both fields must fit in 32
    bits, or it raises `ValueError`.
  - `to_bytes()` gives 8 little-endian bytes.
  - `Voxel.from_bytes(data)` reads them back. It raises `ValueError` unless
    `data` is exactly 8 bytes.
- `dronemw.voxel_buffer`
  - `VoxelBuffer(capacity=16384)` is a thread-safe ring buffer. `capacity`
    must be a power of two, or it raises `ValueError`. One slot always stays
    free, so the buffer holds at most `capacity - 1` voxels.
  - `push(voxel)` returns `False` when the buffer is full.
  - `pop_bulk(max_count)` removes and returns up to `max_count` voxels, oldest
    first.
  - `len(buffer)` gives the number of voxels queued.
- `dronemw.packet`
  - `PacketHeader` is the header of a packet.
  - `PacketBuilder(mtu=1400)`:
    - `reset(drone_id)` sets the drone id and drops any pending voxels.
    - `add(voxel)` returns `False` once the next voxel would push the packet
      past `mtu`.
    - `finalize()` returns the header followed by the payload, and then
      empties the payload.
    - `len(builder)` gives the number of voxels pending.
- `dronemw.url`
  - `parse("udp://127.0.0.1:48484")` returns a `Url(scheme, host, port)`.
  - It raises `ValueError` when `://` is missing, when there is no `:` before
    the port, or when the port does not start with an integer.
  - The port is reduced to 16 bits.
- `dronemw.transport`
  - `Transport` is the abstract interface: `connect(host, port)`,
    `send(data)` and `close()`. It can be used as a context manager, which
    calls `close()` on exit.
  - `Factory.instance()` is the process-wide registry that maps URL schemes to
    transport creators.
    - `register_backend(scheme, creator)` registers a creator. The first
      registration of a scheme wins.
    - `make(url)` returns a new transport, or `None` for a scheme that has not
      been registered.
- `dronemw.udp`
  - `UdpTransport` sends each packet as one IPv4 datagram, on a best-effort
    basis.
  - `connect` resolves the host. It returns `False`, and prints the error to
    stderr, when resolution fails.
  - Importing this module registers `UdpTransport` under the `"udp"` scheme.
- `dronemw.octomap`
  - `point_to_voxel(x, y, z)` turns a point given in metres into a grey voxel
    (`0x00AAAAAA`).
  - `OctomapSub(buffer, drone_id).marker_callback(markers)` pushes every
    `(x, y, z)` point of every marker into the buffer. It returns how many
    points were stored.
- `dronemw.streamer`
  - `Streamer(buffer, builder, transport, drone_id=1, flush_ms=30)` moves
    voxels from the buffer into packets on the transport.
  - `flush_once()` drains up to 256 voxels and sends each packet as it fills.
  - `run(stop_event)` repeats `flush_once()` every `flush_ms` milliseconds
    until the event is set, and then calls `finish()`.
  - `finish()` sends whatever is pending and returns it. It always sends at
    least a header.

## Example

```python
import threading

import dronemw.udp  # registers the "udp" scheme
from dronemw.octomap import OctomapSub
from dronemw.packet import PacketBuilder
from dronemw.streamer import Streamer
from dronemw.transport import Factory
from dronemw.url import parse
from dronemw.voxel_buffer import VoxelBuffer

url = parse("udp://127.0.0.1:48484")
transport = Factory.instance().make(url)
if transport is None or not transport.connect(url.host, url.port):
    raise SystemExit("cannot create transport")

buffer = VoxelBuffer(16384)
streamer = Streamer(buffer, PacketBuilder(1400), transport, drone_id=1, flush_ms=30)

stop = threading.Event()
worker = threading.Thread(target=streamer.run, args=(stop,))
worker.start()

OctomapSub(buffer, 1).marker_callback([[(0.25, -1.0, 2.5), (0.30, -1.0, 2.5)]])

stop.set()
worker.join()  # run() sends the remaining voxels before returning
transport.close()
```

## Wire format

All fields are little-endian.

| Offset | Size | Field                       |
|--------|------|-----------------------------|
| 0      | 1    | version (1)                 |
| 1      | 1    | flags (0)                   |
| 2      | 2    | drone id                    |
| 4      | 2    | voxel count                 |
| 6      | 2    | reserved (0)                |
| 8      | 8·n  | voxels: morton u32, rgb u32 |

## What it does not do

- There is no command-line program.
- The package does not subscribe to any robotics middleware topic itself.
  `OctomapSub.marker_callback` has to be called with the marker points.
- Parameters such as the drone id, the transport URL and the flush interval
  are passed in by the caller. They are not read from any configuration
  system.
- UDP is the only transport provided.