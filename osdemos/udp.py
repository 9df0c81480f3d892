"""A tiny UDP client and server exchanging fixed-size messages."""

import itertools
import socket

BUFFER_SIZE = 1000
SERVER_PORT = 10000
CLIENT_PORT = 20000


def udp_open(port: int) -> socket.socket:
    """Create a UDP socket bound to ``port`` on all local addresses."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock


def fill_sock_addr(hostname: str | None, port: int) -> tuple[str, int]:
    """Resolve ``hostname`` to an IPv4 address; ``None`` gives the empty address."""
    if hostname is None:
        return ("0.0.0.0", 0)
    return (socket.gethostbyname(hostname), port)


def udp_write(sock: socket.socket, addr: tuple[str, int], data: bytes) -> int:
    """Send ``data`` to ``addr``, returning the number of bytes sent."""
    return sock.sendto(data, addr)


def udp_read(sock: socket.socket, size: int = BUFFER_SIZE) -> tuple[bytes, tuple[str, int]]:
    """Receive one datagram of at most ``size`` bytes and its sender."""
    return sock.recvfrom(size)


def _padded(text: str) -> bytes:
    return text.encode().ljust(BUFFER_SIZE, b"\0")


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(errors="replace")


def serve(sock: socket.socket, count: int | None = None) -> int:
    """Answer each non-empty message with ``goodbye world``; return replies sent.

    Reads ``count`` messages, or runs forever when ``count`` is None.
    """
    replies = 0
    messages = itertools.count() if count is None else range(count)
    for _ in messages:
        print("server:: waiting...")
        data, addr = udp_read(sock, BUFFER_SIZE)
        print(f"server:: read message [size:{len(data)} contents:({_c_string(data)})]")
        if data:
            udp_write(sock, addr, _padded("goodbye world"))
            print("server:: reply")
            replies += 1
    return replies


def client_main(argv=None) -> int:
    """Send ``hello world`` to the local server and print its reply."""
    with udp_open(CLIENT_PORT) as sock:
        addr = fill_sock_addr("localhost", SERVER_PORT)
        message = "hello world"
        print(f"client:: send message [{message}]")
        try:
            udp_write(sock, addr, _padded(message))
        except OSError:
            print("client:: failed to send")
            return 1
        print("client:: wait for reply...")
        data, _ = udp_read(sock, BUFFER_SIZE)
        print(f"client:: got reply [size:{len(data)} contents:({_c_string(data)})")
    return 0


def server_main(argv=None) -> int:
    """Serve replies on the well-known port forever."""
    with udp_open(SERVER_PORT) as sock:
        serve(sock)
    return 0