import os
from typing import (
    TYPE_CHECKING,
    Mapping,
    MutableMapping,
    Optional,
    Protocol,
    Union,
)

from multidict import CIMultiDict, CIMultiDictProxy, istr
from yarl import URL

if TYPE_CHECKING:
    from .credentials import Credential

    CredentialMapping = Mapping[str, Credential]
else:
    CredentialMapping = Mapping


class RequestLike(Protocol):
    method: str
    url: URL
    headers: MutableMapping[str, str]


class ResponseLike(Protocol):
    headers: Optional[Mapping[str, str]]


LooseHeaders = Union[
    Mapping[str, str],
    Mapping[istr, str],
    "CIMultiDict[str]",
    "CIMultiDictProxy[str]",
]
PathLike = Union[str, "os.PathLike[str]"]
