"""Date formatting and Nostr client helpers.

The utils layer sits in the middle of the diamond DAG, depending only on
[notebrotr.models][notebrotr.models].

Attributes:
    dates: Locale-independent ``DD Month YYYY`` formatting of unix timestamps.
    protocol: Client factory and kind-0 metadata fetching from relays.

Note:
    The utils layer has **zero** imports from ``notebrotr.render``.

Examples:
    ```python
    from notebrotr.utils.dates import format_date
    from notebrotr.utils.protocol import fetch_metadata_event
    ```
"""
