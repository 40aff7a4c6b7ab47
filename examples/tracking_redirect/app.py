"""Tracking redirect — campaign parameters remembered as cookies.

A bare ASGI app that answers ``/go`` with a 302 to the shop. The
middleware copies the query string into a cookie on the redirect itself,
and ``/campaign`` takes the cookie name from the ``cid`` parameter.

Serve with any ASGI server.
"""

from qs2cookie import CookieConfig, QS2CookieMiddleware


async def shop(scope, receive, send):
    if scope["type"] != "http":
        return
    if scope["path"] in ("/go", "/campaign"):
        await send(
            {
                "type": "http.response.start",
                "status": 302,
                "headers": [(b"location", b"/shop"), (b"content-length", b"0")],
            }
        )
        await send({"type": "http.response.body", "body": b""})
        return
    await send(
        {
            "type": "http.response.start",
            "status": 200,
            "headers": [(b"content-type", b"text/plain; charset=utf-8")],
        }
    )
    await send({"type": "http.response.body", "body": b"Welcome to the shop"})


app = QS2CookieMiddleware(
    shop,
    CookieConfig(
        expires=30 * 86400,
        ignore=("session", "token"),
        max_size=512,
    ),
    overrides=[
        ("/campaign", CookieConfig(cookie_name_from="cid", prefix="cmp_")),
    ],
)
