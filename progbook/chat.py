"""A chat server that relays each client's lines to all other clients."""

from __future__ import annotations

import argparse
import asyncio
import contextlib


def _address(peer) -> str:
    if not peer:
        return "unknown"
    host, port = peer[0], peer[1]
    if ":" in str(host):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class ChatServer:
    """Tracks connected clients and broadcasts messages to them."""

    def __init__(self) -> None:
        self._clients: set[asyncio.Queue] = set()

    def broadcast(self, message: str) -> None:
        """Queue message for every connected client."""
        for client in self._clients:
            client.put_nowait(message)

    async def _client_writer(self, writer: asyncio.StreamWriter, outgoing: asyncio.Queue) -> None:
        while (message := await outgoing.get()) is not None:
            writer.write((message + "\n").encode())
            with contextlib.suppress(ConnectionError):
                await writer.drain()

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        """Serve one client connection until it closes."""
        outgoing: asyncio.Queue = asyncio.Queue()
        sender = asyncio.create_task(self._client_writer(writer, outgoing))
        who = _address(writer.get_extra_info("peername"))
        outgoing.put_nowait("You are " + who)
        self.broadcast(who + " has arrived")
        self._clients.add(outgoing)
        try:
            async for raw in reader:
                line = raw.decode("utf-8", "replace").removesuffix("\n").removesuffix("\r")
                self.broadcast(f"{who}: {line}")
        except ConnectionError:
            pass
        self._clients.discard(outgoing)
        outgoing.put_nowait(None)
        self.broadcast(who + " has left")
        await sender
        writer.close()
        with contextlib.suppress(ConnectionError):
            await writer.wait_closed()

    async def serve(self, host: str = "localhost", port: int = 8000) -> None:
        """Accept clients forever."""
        server = await asyncio.start_server(self.handle, host, port)
        async with server:
            await server.serve_forever()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Run a chat server.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    asyncio.run(ChatServer().serve(args.host, args.port))