from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

ELIMINATION_ORDERS = ('lowest', 'fewest_edges')

DEFAULTS = {
    'ELIMINATION_ORDER': 'lowest',
    'SUPER_START': False,
    'PRUNE_USELESS_STATES': False,
    'VERIFY': False,
}


def get_setting(name: str) -> Any:
    """
    Look up a converter option from the GNFA_CONVERTER settings dict.

    Raises:
        ImproperlyConfigured: For unknown option names or an unknown elimination order
    """
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f'Unknown GNFA_CONVERTER option: {name}')

    # Outside a configured Django project the defaults apply
    options = getattr(settings, 'GNFA_CONVERTER', {}) if settings.configured else {}
    options = options or {}
    value = options.get(name, DEFAULTS[name])

    if name == 'ELIMINATION_ORDER' and value not in ELIMINATION_ORDERS:
        raise ImproperlyConfigured(
            f"GNFA_CONVERTER['ELIMINATION_ORDER'] must be one of {', '.join(ELIMINATION_ORDERS)}, got {value!r}"
        )
    return value
