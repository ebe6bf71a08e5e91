"""
Text serialization

The decimal string produced by :meth:`Signed.to_dec_string` is the only
wire representation. It is what :func:`dumps` writes, what
:class:`SignedJSONEncoder` emits for JSON and what pickling stores.
"""
import json
import logging
from typing import Any, Callable, Dict, Type, Union

from .signed import Signed
from .uint import Uint

logger = logging.getLogger(__name__)


def dumps(value: Union[Signed, Uint]) -> str:
    """Serialize to the decimal wire form."""
    return str(value)


def loads(text: str, cls: Type[Signed]) -> Signed:
    """Deserialize the decimal wire form.

    :param text: Decimal string, e.g. ``"-42"``
    :param cls: Signed type to read into, e.g. :data:`signedint.I256`

    :raises ParseSignedError: If the text is malformed or does not fit
    """
    return cls.from_dec_str(text)


class SignedJSONEncoder(json.JSONEncoder):
    """JSON encoder writing :class:`Signed` and :class:`Uint` as decimal strings."""

    def default(self, o):
        if isinstance(o, (Signed, Uint)):
            return str(o)
        return super().default(o)


def object_hook(fields: Dict[str, Type[Signed]]) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Build a :func:`json.loads` object hook reading the given keys back.

    :param fields: Maps key names to the Signed type of their values
    """
    def hook(obj: Dict[str, Any]) -> Dict[str, Any]:
        for key, cls in fields.items():
            if isinstance(obj.get(key), str):
                logger.debug("Decoding %s as %s", key, cls.__name__)
                obj[key] = loads(obj[key], cls)
        return obj
    return hook
