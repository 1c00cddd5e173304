#!/usr/bin/env python
import difflib
import logging
import re

from calsync.lib.python_utilities import to_normal_str

## Global counter.  We don't want to be too verbose on the users
fixup_error_loggings = 0

log = logging.getLogger("calsync.vcal")

## Some servers wrap the calendar-data in XML once more than needed, so
## that the CR of every CRLF survives as a literal character reference
_ESCAPED_CR = re.compile(r"&#(?:13|x0*[dD]);\n?")

## TZID=Europe/Berlin,Europe/Paris, the whole list up to the next
## parameter or the value
_MULTI_TZID = re.compile(
    r'(?<!\\)(;TZID=(?:"[^"]*"|[^;:,"]*))(?:,(?:"[^"]*"|[^;:,"]*))+(?=[;:])'
)


def unescape_line_endings(data):
    """Turns literal "&#13;" character references back into real CRLF
    line endings.  A reference directly followed by a newline counts as
    one line ending, not two.
    """
    if not data:
        return data
    return _ESCAPED_CR.sub("\r\n", data)


def fix(event):
    """This function receives some ical as it's given from the server, checks for
    breakages with the standard, and attempts to fix up known issues:

    1) Trailing white space, seen on X-APPLE-STRUCTURED-EVENT lines.
    icalendar ignores such lines, vobject chokes on them.

    2) iCloud duplicates the DTSTAMP property sometimes - keep the
    first DTSTAMP encountered.

    3) Zimbra can create events with both DTEND and DURATION set,
    which is forbidden according to the RFC.  We drop DURATION or
    DTEND (whatever comes last).

    4) Some servers send a list of TZIDs on DTSTART/DTEND.  TZID takes
    one value only, the first one is kept.
    """
    event = to_normal_str(event)
    if not event.endswith("\n"):
        event = event + "\n"

    ## 1) trailing whitespace probably never makes sense
    fixed = re.sub(" +$", "", event, flags=re.MULTILINE)

    ## 2) remove duplication of DTSTAMP ... and ...
    ## 3) remove DURATION or DTEND/DUE if both are set.
    fixed2 = (
        "\n".join(filter(LineFilterDiscardingDuplicates(), fixed.strip().split("\n")))
        + "\n"
    )
    ## 4) only the first TZID of a list
    fixed2 = _MULTI_TZID.sub(r"\1", fixed2)

    if fixed2 != event:
        ## Rate-limiting of the warning, only powers of two (1, 2,
        ## 4, 8, 16, ...) gets through as warnings.
        global fixup_error_loggings
        fixup_error_loggings += 1
        is_power_of_two = lambda n: not (n & (n - 1))
        if is_power_of_two(fixup_error_loggings):
            logfunc = log.warning
        else:
            logfunc = log.debug

        log_message = [
            "Ical data was modified to avoid compatibility issues",
            "(Your calendar server breaks the icalendar standard)",
            f"(error count: {fixup_error_loggings} - this error is ratelimited)",
        ]
        diff = list(
            difflib.unified_diff(event.split("\n"), fixed2.split("\n"), lineterm="")
        )
        logfunc("\n".join(log_message + diff))

    return fixed2


class LineFilterDiscardingDuplicates:
    """Needs to be a class because it keeps track of whether a certain
    group of date line was already encountered within a component.
    This must be called line by line in order on the complete text.

    Components nest (a VALARM inside a VEVENT), so every open component
    gets its own counters.
    """

    def __init__(self) -> None:
        self.stack = [{"stamped": 0, "ended": 0}]

    def __call__(self, line):
        counters = self.stack[-1]
        if line.startswith("BEGIN:"):
            self.stack.append({"stamped": 0, "ended": 0})

        elif line.startswith("END:"):
            if len(self.stack) > 1:
                self.stack.pop()

        elif re.match("(DURATION|DTEND|DUE)[:;]", line):
            if counters["ended"]:
                return False
            counters["ended"] += 1

        elif re.match("DTSTAMP[:;]", line):
            if counters["stamped"]:
                return False
            counters["stamped"] += 1

        return True
