"""
Session layer: keyed stores, action tokens and outbound views.

The orchestrator lives in storefront.core.session.orchestrator and is not
re-exported here, because the cart and dialog modules import the store.
"""

from storefront.core.session.actions import Action, ActionKind, parse_action
from storefront.core.session.store import MemorySessionStore, SessionStore
from storefront.core.session.views import Button, Keyboard, Outcome, View

__all__ = [
    "Action",
    "ActionKind",
    "parse_action",
    "MemorySessionStore",
    "SessionStore",
    "Button",
    "Keyboard",
    "Outcome",
    "View",
]
