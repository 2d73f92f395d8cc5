from htpy import Node, body, h1, head, header, html, link, main, meta, script, title


def render_page(*, title_text: str, content: Node) -> Node:
    return html(lang="en")[
        head[
            meta(charset="utf-8"),
            title[title_text],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            meta(name="color-scheme", content="light dark"),
            link(rel="stylesheet", href="/static/app.css"),
        ],
        body[
            header(class_="app-header")[h1["Thread Inbox"],],
            main(class_="main-content")[content],
            script(src="/static/app.js", defer=True),
        ],
    ]
