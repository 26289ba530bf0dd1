"""Simulated networking and HTTP primitives with fixed handles and responses."""

from __future__ import annotations

SERVER_SOCKET = 1
CLIENT_SOCKET = 2
OUTGOING_SOCKET = 3
HTTP_OK = 200
SIMULATED_RESPONSE = "Simulated network response"


def http_get(url: str) -> int:
    """Pretend to fetch the URL; always reports status 200."""
    print(f"[HTTP] GET request to: {url} (placeholder)")
    return HTTP_OK


def create_server(port: int) -> int:
    """Pretend to listen on the port and return a server handle."""
    print(f"[NETWORK] Creating server on port {port} (simulated)")
    return SERVER_SOCKET


def accept_connection(server_socket: int) -> int:
    """Pretend to accept a connection and return a client handle."""
    print(f"[NETWORK] Accepting connection on socket {server_socket} (simulated)")
    return CLIENT_SOCKET


def connect_to_server(address: str, port: int) -> int:
    """Pretend to connect and return a socket handle."""
    print(f"[NETWORK] Connecting to {address}:{port} (simulated)")
    return OUTGOING_SOCKET


def send_data(socket: int, data: str) -> int:
    """Pretend to send data; return the number of bytes it occupies."""
    print(f"[NETWORK] Sending data on socket {socket}: {data}")
    return len(data.encode("utf-8"))


def receive_data(socket: int) -> str:
    """Pretend to receive data and return a fixed response."""
    print(f"[NETWORK] Receiving data on socket {socket} (simulated)")
    return SIMULATED_RESPONSE


def close_socket(socket: int) -> None:
    """Pretend to close the socket."""
    print(f"[NETWORK] Closing socket {socket}")