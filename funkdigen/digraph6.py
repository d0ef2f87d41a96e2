"""
The digraph6 exchange format for directed graphs.

A digraph6 string is '&', followed by the number of vertices n, followed by
the n * n bits of the adjacency matrix in row-major order. Everything after
the '&' is written in printable bytes, each carrying a group of 6 bits plus
63. The bit groups are filled most significant bit first and the last group
is padded with zeros.

    n in [0, 62]:         one byte n + 63
    n in [63, 258047]:    126, then n in 3 groups
    n >= 258048:          126, 126, then n in 6 groups
"""

HEADER = b"&"
BIAS = 63
WIDE = 126


class Digraph6Error(ValueError):
    pass


def _groups(value, count):
    return bytes(((value >> (6 * (count - 1 - i))) & 63) + BIAS for i in range(count))


def encode_size(n):
    if n < 0:
        raise ValueError(f"vertex count must be nonnegative, got {n}")
    if n <= 62:
        return bytes([n + BIAS])
    if n <= 258047:
        return bytes([WIDE]) + _groups(n, 3)
    if n < 1 << 36:
        return bytes([WIDE, WIDE]) + _groups(n, 6)
    raise ValueError(f"vertex count too large for digraph6: {n}")


def _value(data):
    value = 0
    for byte in data:
        value = (value << 6) | (byte - BIAS)
    return value


def decode_size(data):
    """Read the vertex count at the start of data; return (n, bytes used)."""
    if not data:
        raise Digraph6Error("missing vertex count")
    if data[0] != WIDE:
        return data[0] - BIAS, 1
    if len(data) >= 2 and data[1] == WIDE:
        if len(data) < 8:
            raise Digraph6Error("truncated vertex count")
        return _value(data[2:8]), 8
    if len(data) < 4:
        raise Digraph6Error("truncated vertex count")
    return _value(data[1:4]), 4


def encode(f, loopless=False):
    """
    Encode the functional digraph f (f[v] is the target of v) as a digraph6
    line, newline included. With loopless the diagonal of the matrix is
    cleared, so self-loops are dropped.
    """
    n = len(f)
    body = bytearray((n * n + 5) // 6)
    for v, w in enumerate(f):
        if loopless and v == w:
            continue
        pos = v * n + w
        body[pos // 6] |= 1 << (5 - pos % 6)
    return HEADER + encode_size(n) + bytes(b + BIAS for b in body) + b"\n"


def decode(data):
    """
    Decode a digraph6 line into adjacency lists: the result holds, for each
    vertex, the sorted list of its out-neighbours.
    """
    if isinstance(data, str):
        data = data.encode("ascii")
    data = data.rstrip(b"\r\n")
    if not data.startswith(HEADER):
        raise Digraph6Error("digraph6 data must start with '&'")
    data = data[len(HEADER):]
    if any(not BIAS <= b <= WIDE for b in data):
        raise Digraph6Error("byte out of range for digraph6")
    n, used = decode_size(data)
    body = data[used:]
    nbits = n * n
    if len(body) != (nbits + 5) // 6:
        raise Digraph6Error(f"expected {(nbits + 5) // 6} bytes of adjacency data, got {len(body)}")
    groups = [b - BIAS for b in body]
    if nbits % 6 and groups[-1] & ((1 << (6 - nbits % 6)) - 1):
        raise Digraph6Error("nonzero padding bits")
    adjacency = [[] for _ in range(n)]
    for pos in range(nbits):
        if groups[pos // 6] >> (5 - pos % 6) & 1:
            adjacency[pos // n].append(pos % n)
    return adjacency


def to_function(adjacency):
    """Convert adjacency lists with all outdegrees 1 to a function list."""
    f = []
    for v, targets in enumerate(adjacency):
        if len(targets) != 1:
            raise Digraph6Error(f"vertex {v} has outdegree {len(targets)}, expected 1")
        f.append(targets[0])
    return f
