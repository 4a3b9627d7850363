"""
content_prefix_edge — Hello World

CloudFront hands the function an event, the function prefixes the
request URI with /content and hands the request back.
"""

from content_prefix_edge import handle, handler

# ─── A viewer-request event as CloudFront delivers it ───


def make_event(uri: str) -> dict:
    return {
        "Records": [
            {
                "cf": {
                    "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "viewer-request"},
                    "request": {
                        "clientIp": "203.0.113.178",
                        "method": "GET",
                        "querystring": "",
                        "uri": uri,
                        "headers": {"host": [{"key": "Host", "value": "d111111abcdef8.cloudfront.net"}]},
                    },
                }
            }
        ]
    }


def report(error, request) -> None:
    if error is not None:
        print(f"  [ERROR] {error}")
    else:
        print(f"  [OK]    uri={request['uri']}")


def main():
    # ──────────────────────────────────────
    #  1. Return style (the Python Lambda signature)
    # ──────────────────────────────────────
    request = handler(make_event("/index.html"), None)
    print(f"handler: {request['uri']}")

    # ──────────────────────────────────────
    #  2. Callback style
    # ──────────────────────────────────────
    print("handle:")
    handle(make_event("/a/b?x=1"), None, report)
    handle({"Records": []}, None, report)

    # ──────────────────────────────────────
    #  3. Not idempotent
    # ──────────────────────────────────────
    event = make_event("/img.png")
    handler(event, None)
    twice = handler(event, None)
    print(f"twice:   {twice['uri']}")


if __name__ == "__main__":
    main()
