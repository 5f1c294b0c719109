import json
import math

from packets import PacketError, parse_raw_packet


def _reject_constant(name):
    raise PacketError(f"{name} is not a valid JSON number")


# same bound CPython 3.11+ applies to int() on strings
MAX_INT_DIGITS = 4300


def _bounded_int(text):
    digits = len(text.lstrip("-"))
    if digits > MAX_INT_DIGITS:
        raise PacketError(f"integer literal of {digits} digits is too long")
    return int(text)


def _finite_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise PacketError(f"number {text[:32]} is out of range")
    return value


class PacketFactory:
    @staticmethod
    def build(packet) -> str:
        """Serialize a packet to a compact JSON text frame."""
        return json.dumps(packet.to_message(), separators=(",", ":"), allow_nan=False)

    @staticmethod
    def parse(raw_data):
        """Deserialize a text (or binary) frame into a packet.

        Returns None for an unknown ``type``; raises PacketError when the frame
        is not strict JSON or does not match its packet shape.
        """
        try:
            raw = json.loads(raw_data, parse_constant=_reject_constant, parse_float=_finite_float, parse_int=_bounded_int)
        except PacketError:
            raise
        except (ValueError, RecursionError) as e:
            # ValueError covers bad syntax and bad encoding
            raise PacketError(f"invalid JSON: {str(e)[:80]}") from e
        return parse_raw_packet(raw)
