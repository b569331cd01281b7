import re
from datetime import datetime, timezone

from smart_attend.sessions.codes import SessionCodeGenerator

CODE_RE = re.compile(r"^ATT-\d{13}-[a-z0-9]{8}$")


def test_code_format_embeds_millis_and_suffix():
    fixed = datetime(2025, 1, 1, 8, 0, 0, 123000, tzinfo=timezone.utc)
    gen = SessionCodeGenerator(clock=lambda: fixed)

    code = gen.generate()

    assert CODE_RE.match(code)
    assert code.split("-")[1] == str(int(fixed.timestamp() * 1000))


def test_ten_thousand_codes_never_collide():
    gen = SessionCodeGenerator()
    codes = [gen() for _ in range(10_000)]

    assert len(set(codes)) == len(codes)


def test_repeated_draw_is_redrawn():
    fixed = datetime(2025, 1, 1, tzinfo=timezone.utc)
    # First two codes draw the same suffix; the second must be redrawn.
    letters = iter("aaaaaaaa" + "aaaaaaaa" + "bbbbbbbb")
    gen = SessionCodeGenerator(clock=lambda: fixed, choice=lambda alphabet: next(letters))

    first = gen.generate()
    second = gen.generate()

    assert first.endswith("-aaaaaaaa")
    assert second.endswith("-bbbbbbbb")
