from htpy import Node, button, div, form, input, option, p, section, select, span, textarea

from inbox_core.models import SENDERS, THREAD_STATUSES
from inbox_server.views.components.status_filter import status_filter
from inbox_server.views.layout import render_page


def render_inbox(*, directory: str) -> Node:
    content = div(class_="inbox-page", id="inbox", data_dir=directory)[
        div(class_="inbox-header")[
            p(class_="inbox-dir")["Watching: ", span(class_="dir-path")[directory]],
            status_filter(),
            form(class_="new-thread-form", id="new-thread-form")[
                input(type="text", name="title", placeholder="New thread title", required=True),
                button(type="submit")["Create"],
            ],
            button(type="button", id="purge-button", class_="danger")["Purge resolved"],
        ],
        div(class_="inbox-body")[
            section(class_="thread-list", id="thread-list")[p(class_="empty")["Loading..."]],
            section(class_="thread-detail", id="thread-detail", hidden=True)[
                div(class_="thread-detail-header", id="thread-detail-header"),
                div(class_="thread-messages", id="thread-messages"),
                form(class_="message-form", id="message-form")[
                    textarea(name="content", placeholder="Message", required=True, rows="3"),
                    select(name="from")[(option(value=sender, selected=(sender == "user"))[sender] for sender in SENDERS)],
                    select(name="status")[
                        option(value="")["(keep status)"],
                        (option(value=status)[status] for status in THREAD_STATUSES),
                    ],
                    button(type="submit")["Send"],
                ],
                div(class_="thread-actions")[
                    button(type="button", id="resolve-button")["Resolve"],
                    button(type="button", id="reopen-button")["Reopen"],
                ],
            ],
        ],
    ]
    return render_page(title_text="Thread Inbox", content=content)
