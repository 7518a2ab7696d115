"""
Example: interpret a Solid server's answer to an OPTIONS request

Any transport works; copy its status, headers, body and final URL
into a RawResponse (or any object with the same interface).
"""

from solid import RawResponse, new_response_view


def main() -> None:
    raw = RawResponse(
        status_code=200,
        headers=[
            ("Content-Type", "text/turtle"),
            (
                "Link",
                '<https://alice.example.org/notes/.acl>; rel="acl", '
                '<https://alice.example.org/notes/.meta>; rel="describedBy", '
                '<http://www.w3.org/ns/ldp#BasicContainer>; rel="type"',
            ),
            ("Allow", "OPTIONS, HEAD, GET, POST, PUT, DELETE"),
            ("Accept-Patch", "application/sparql-update"),
            ("User", "https://alice.example.org/profile/card#me"),
            ("Updates-Via", "wss://alice.example.org"),
        ],
        body=b"",
        url="https://alice.example.org/notes/",
    )
    view = new_response_view(raw, "OPTIONS")
    print(view)
    print("ACL:", view.acl)
    print("Meta:", view.meta)
    print("Container:", view.is_container())
    print("Allowed:", sorted(view.allowed_methods))
    print("Logged in as:", view.user if view.is_logged_in() else "(anonymous)")
    print("Websocket:", view.websocket)

    missing = new_response_view(None, "GET")
    print(missing, "exists:", missing.exists())


if __name__ == "__main__":
    main()
