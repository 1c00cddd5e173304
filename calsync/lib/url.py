#!/usr/bin/env python
import urllib.parse
from typing import cast
from typing import Optional
from typing import Union
from urllib.parse import ParseResult
from urllib.parse import SplitResult
from urllib.parse import urljoin
from urllib.parse import urlparse

from calsync.lib.python_utilities import to_unicode


class URL:
    """
    Thin wrapper around an URL string or a urlparse result.

    Servers hand out hrefs in one of three shapes:

    1) a path relative to the collection, i.e. "event-1.ics"

    2) an absolute path, i.e. "/dav/calendars/user/work/event-1.ics"

    3) a fully qualified URL, i.e.
    "https://cal.example.com/dav/calendars/user/work/event-1.ics".

    join() resolves the first two against a base URL the same way a
    web browser resolves a link, a fully qualified href is kept as is.
    """

    def __init__(self, url: Union[str, ParseResult, SplitResult]) -> None:
        if isinstance(url, ParseResult) or isinstance(url, SplitResult):
            self.url_parsed: Optional[Union[ParseResult, SplitResult]] = url
            self.url_raw = None
        else:
            self.url_raw = to_unicode(url)
            self.url_parsed = None

    def __bool__(self) -> bool:
        if self.url_raw or self.url_parsed:
            return True
        else:
            return False

    def __eq__(self, other: object) -> bool:
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    @classmethod
    def objectify(cls, url: Union["URL", str, ParseResult, SplitResult, None]) -> Optional["URL"]:
        if url is None or isinstance(url, URL):
            return url
        else:
            return URL(url)

    # To deal with all kind of methods/properties in the ParseResult
    # class
    def __getattr__(self, attr: str):
        if "url_parsed" not in vars(self):
            raise AttributeError
        if self.url_parsed is None:
            self.url_parsed = cast(urllib.parse.ParseResult, urlparse(self.url_raw))
        if hasattr(self.url_parsed, attr):
            return getattr(self.url_parsed, attr)
        else:
            return getattr(str(self), attr)

    def __str__(self) -> str:
        if self.url_raw is None:
            if self.url_parsed is None:
                raise ValueError("Unexpected value None for self.url_parsed")
            self.url_raw = self.url_parsed.geturl()
        return self.url_raw

    def __repr__(self) -> str:
        return "URL(%s)" % str(self)

    def is_absolute(self) -> bool:
        return bool(self.scheme and self.netloc)

    def join(self, path: Union["URL", str, None]) -> "URL":
        """
        assumes this object is the base URL.  A relative path is
        resolved against it, an absolute path replaces the path of
        the base, a fully qualified URL is returned unchanged.
        """
        if not path or not str(path):
            return self
        path = URL.objectify(path)
        if path.is_absolute():
            return path
        return URL(urljoin(str(self), str(path)))

