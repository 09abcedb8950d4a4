import io
import logging
import math
import sys
from dataclasses import dataclass

import blessed
from ovld import ovld

from .geometry import Measurement

log = logging.getLogger(__name__)
T = blessed.Terminal()

PROMPT = "Enter radius (in cm):"


class InvalidInput(ValueError):
    """Raised when the input does not hold a usable radius.

    ``token`` is the rejected token, or None if the input ended before a
    radius could be read.
    """

    def __init__(self, token):
        self.token = token
        if token is None:
            message = "Expected a radius (in cm), but the input ended."
        else:
            message = (
                f"Invalid radius (in cm): {token!r}."
                " Expected a non-negative number."
            )
        super().__init__(message)


@dataclass
class AreaResult:
    measurement: Measurement

    def __str__(self):
        return f"Circle's area is {self.measurement.area:.2f} (sq in)."


@dataclass
class CircumferenceResult:
    measurement: Measurement

    def __str__(self):
        return (
            f"Its circumference is {self.measurement.circumference:.2f} (in)."
        )


@ovld
def report(exc: InvalidInput, stream):
    print(T.bold_red(str(exc)), file=stream, flush=True)


@ovld
def report(event: object, stream):
    print(event, file=stream, flush=True)


def read_tokens(stream):
    """Yield whitespace-delimited tokens from stream, across lines.

    Lines are only read when the next token is requested, so a prompt
    printed before asking for a token shows up before the read blocks.
    A line that cannot be decoded ends the stream with InvalidInput.
    """
    try:
        for line in stream:
            yield from line.split()
    except UnicodeDecodeError as exc:
        raise InvalidInput(exc.object[exc.start : exc.end]) from None


def parse_radius(token):
    try:
        radius = float(token)
    except ValueError:
        raise InvalidInput(token) from None
    if not math.isfinite(radius) or radius < 0:
        raise InvalidInput(token)
    return radius


def next_measurement(tokens):
    token = next(tokens, None)
    if token is None:
        raise InvalidInput(None)
    try:
        measurement = Measurement(parse_radius(token))
    except InvalidInput:
        log.debug("Rejected token %r", token)
        raise
    log.debug(
        "radius %g cm = %g in", measurement.radius, measurement.inches
    )
    return measurement


def _streams(stdin, stdout, stderr):
    if stdin is None:
        stdin = sys.stdin
        # Undecodable bytes become surrogates, rejected as ordinary tokens
        if isinstance(stdin, io.TextIOWrapper):
            stdin.reconfigure(errors="surrogateescape")
    return (
        stdin,
        sys.stdout if stdout is None else stdout,
        sys.stderr if stderr is None else stderr,
    )


def run_once(stdin=None, stdout=None, stderr=None):
    """Ask for one radius and print the area of that circle.

    Returns the exit status: 0 on success, 1 if the input was invalid.
    """
    stdin, stdout, stderr = _streams(stdin, stdout, stderr)
    tokens = read_tokens(stdin)

    report(PROMPT, stdout)
    try:
        measurement = next_measurement(tokens)
    except InvalidInput as exc:
        report(exc, stderr)
        return 1

    report(AreaResult(measurement), stdout)
    return 0


def run_loop(stdin=None, stdout=None, stderr=None):
    """Print area and circumference for each radius until a zero radius.

    The body always runs at least once and the radius is tested after
    the results are printed, so a zero radius still gets its (zero)
    results. Invalid tokens are reported and the prompt is repeated.
    Returns 0 once a zero radius was read, 1 if the input ended first.
    """
    stdin, stdout, stderr = _streams(stdin, stdout, stderr)
    tokens = read_tokens(stdin)

    while True:
        report(PROMPT, stdout)
        try:
            measurement = next_measurement(tokens)
        except InvalidInput as exc:
            report(exc, stderr)
            if exc.token is None:
                return 1
            continue

        report(AreaResult(measurement), stdout)
        report(CircumferenceResult(measurement), stdout)
        if measurement.radius == 0:
            return 0
