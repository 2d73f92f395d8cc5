from htpy import BaseElement, button, div

from inbox_core.models import THREAD_FILTERS


def status_filter(*, selected: str = "") -> BaseElement:
    """Row of filter buttons; an empty value means all threads."""
    options = [("", "all"), *((value, value) for value in THREAD_FILTERS)]
    return div(class_="status-filter", role="tablist")[
        (
            button(
                type="button",
                class_="filter-button active" if value == selected else "filter-button",
                data_filter=value,
            )[label]
            for value, label in options
        )
    ]
