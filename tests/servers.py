# File: tests/servers.py
"""In-process aiohttp servers standing in for the rescue sites."""
import gzip
import json
from collections.abc import AsyncIterator

from aiohttp import web

from .samples import ADOPTAPET_PAGE, PETFINDER_JSON, SEAACA_PAGE


async def serve_app(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on a free local port, yield its base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        await runner.cleanup()


def build_shelter_app() -> web.Application:
    """One fake rescue site exposing every kind of response the fetcher has to handle."""
    app = web.Application()

    async def seaaca(_):
        return web.Response(text=SEAACA_PAGE, content_type="text/html")

    async def adoptapet(_):
        return web.Response(text=ADOPTAPET_PAGE, content_type="text/html")

    async def petfinder(request):
        if request.headers.get("X-Requested-With") != "XMLHttpRequest":
            return web.Response(text="<html>not json</html>", content_type="text/html")
        return web.json_response(PETFINDER_JSON)

    async def petfinder_gzip(_):
        return web.Response(
            body=gzip.compress(json.dumps(PETFINDER_JSON).encode("utf-8")),
            headers={"Content-Encoding": "gzip", "Content-Type": "application/json"},
        )

    async def bad_gzip(_):
        return web.Response(
            body=b"definitely not gzip",
            headers={"Content-Encoding": "gzip", "Content-Type": "text/html"},
        )

    async def broken_json(_):
        return web.Response(text="{\"result\": [", content_type="application/json")

    async def server_error(_):
        return web.Response(status=503, text="down")

    app.router.add_get("/seaaca", seaaca)
    app.router.add_get("/adoptapet", adoptapet)
    app.router.add_get("/petfinder", petfinder)
    app.router.add_get("/petfinder-gz", petfinder_gzip)
    app.router.add_get("/bad-gzip", bad_gzip)
    app.router.add_get("/broken-json", broken_json)
    app.router.add_get("/down", server_error)
    return app
