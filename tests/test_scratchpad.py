"""Tests for the scratchpad parser."""

from goodbuddi.entities import Event
from goodbuddi.scratchpad import parse_scratchpad


def _without_ids(events):
    out = []
    for e in events:
        d = e.to_dict()
        d.pop("id")
        for a in d["activities"]:
            a.pop("id")
        out.append(d)
    return out


def test_text_without_bullets_yields_nothing():
    assert parse_scratchpad("") == []
    assert parse_scratchpad("just thinking out loud\n\tindented but no bullet\n\n") == []


def test_three_level_outline():
    text = (
        "• Morning routine @ 7:00 AM *1 hour\n"
        "\t• Stretch\n"
        "\t\t• 10 min yoga\n"
        "\t\t• breathing\n"
        "\t• Shower\n"
        "• Work *8\n"
        "\t• Standup\n"
    )
    events = parse_scratchpad(text)

    assert [e.title for e in events] == ["Morning routine", "Work"]
    morning, work = events
    assert morning.time == "7:00 AM"
    assert morning.duration == "1 hour"
    assert [a.name for a in morning.activities] == ["Stretch", "Shower"]
    assert morning.activities[0].details == ["10 min yoga", "breathing"]
    assert morning.activities[1].details == []
    assert work.duration == "8 hours"
    assert [a.name for a in work.activities] == ["Standup"]


def test_time_and_duration_are_extracted():
    [event] = parse_scratchpad("• Plan trip @ 3:00 PM *2 hours")
    assert event.title == "Plan trip"
    assert event.time == "3:00 PM"
    assert event.duration == "2 hours"
    assert event.is_maybe is False


def test_maybe_prefix():
    [event] = parse_scratchpad("• maybe: Call mom")
    assert event.title == "Call mom"
    assert event.is_maybe is True
    assert event.time is None
    assert event.duration is None
    assert event.kind == "maybe"


def test_maybe_prefix_is_case_insensitive():
    [event] = parse_scratchpad("• MAYBE:   Gym")
    assert event.is_maybe is True
    assert event.title == "Gym"


def test_duration_unit_is_kept_verbatim():
    [event] = parse_scratchpad("• Clean house *45 min")
    assert event.duration == "45 min"
    assert event.title == "Clean house"


def test_long_unit_words_are_not_truncated():
    [event] = parse_scratchpad("• Read *30 minutes")
    assert event.duration == "30 minutes"
    assert event.title == "Read"


def test_duration_defaults_to_hours():
    [plain] = parse_scratchpad("• Meditate")
    assert plain.duration is None

    [bare] = parse_scratchpad("• Meditate *30")
    assert bare.duration == "30 hours"
    assert bare.title == "Meditate"


def test_decimal_duration_and_compact_time():
    [event] = parse_scratchpad("• Gym @9am *1.5 hours")
    assert event.time == "9am"
    assert event.duration == "1.5 hours"
    assert event.title == "Gym"
    assert event.kind == "timed"


def test_time_is_not_validated():
    [event] = parse_scratchpad("• Odd @ 23:45 pm")
    assert event.time == "23:45 pm"


def test_time_keeps_matched_text():
    [event] = parse_scratchpad("• Nap @ 3 *2")
    assert event.time == "3 "
    assert event.duration == "2 hours"
    assert event.title == "Nap"


def test_activity_before_any_event_is_dropped():
    assert parse_scratchpad("\t• orphan\n\t\t• detail") == []

    [event] = parse_scratchpad("\t• orphan\n• Event")
    assert event.activities == []


def test_detail_before_any_activity_is_dropped():
    [event] = parse_scratchpad("• Event\n\t\t• lost detail\n\t• Act")
    assert [a.name for a in event.activities] == ["Act"]
    assert event.activities[0].details == []


def test_lines_without_bullet_are_dropped_and_keep_state():
    text = "• Event\n\tno bullet here\n\t• Act\nplain note\n\t\t• detail"
    [event] = parse_scratchpad(text)
    assert [a.name for a in event.activities] == ["Act"]
    assert event.activities[0].details == ["detail"]


def test_blank_lines_do_not_reset_state():
    [event] = parse_scratchpad("• Event\n\n   \n\t• Act\n\n\t\t• note")
    assert event.activities[0].name == "Act"
    assert event.activities[0].details == ["note"]


def test_dash_bullets():
    [event] = parse_scratchpad("- Event\n\t- Act\n\t\t- detail")
    assert event.title == "Event"
    assert event.activities[0].name == "Act"
    assert event.activities[0].details == ["detail"]


def test_empty_bullets_are_skipped():
    [event] = parse_scratchpad("• \n•\n• Real\n\t• ")
    assert event.title == "Real"
    assert event.activities == []


def test_deeper_indentation_contributes_nothing():
    [event] = parse_scratchpad("• E\n\t• A\n\t\t\t• too deep")
    assert event.activities[0].details == []


def test_activity_markers_are_stripped_from_names():
    [event] = parse_scratchpad("• E\n\t• Call @ 2pm *15 min")
    assert event.activities[0].name == "Call"


def test_windows_line_endings():
    [event] = parse_scratchpad("• Event\r\n\t• Act\r\n")
    assert event.title == "Event"
    assert event.activities[0].name == "Act"


def test_fresh_entities_are_not_completed_and_ids_are_unique():
    events = parse_scratchpad("• A\n\t• one\n\t• two\n• B\n\t• three")
    ids = [e.id for e in events] + [a.id for e in events for a in e.activities]
    assert len(ids) == len(set(ids))
    assert not any(e.completed for e in events)
    assert not any(a.completed or a.skipped for e in events for a in e.activities)


def test_reparse_is_equal_except_ids():
    text = "• Plan trip @ 3:00 PM *2 hours\n\t• Book hotel\n\t\t• near the beach\n• maybe: Call mom"
    first = parse_scratchpad(text)
    second = parse_scratchpad(text)

    assert _without_ids(first) == _without_ids(second)
    assert {e.id for e in first}.isdisjoint(e.id for e in second)


def test_garbage_never_raises():
    for text in (None, "@@@", "***", "•••", "\t\t\t", "maybe:", "• @ *", "-\n--\n\t-"):
        assert isinstance(parse_scratchpad(text), list)


def test_stored_shape_reloads():
    [event] = parse_scratchpad("• maybe: Trip @ 9am *2\n\t• Pack\n\t\t• socks")
    event.activities[0].skipped = True

    stored = event.to_dict()
    assert stored["isMaybe"] is True
    assert stored["activities"][0] == {
        "id": event.activities[0].id,
        "name": "Pack",
        "details": ["socks"],
        "completed": False,
        "skipped": True,
    }
    assert Event.from_dict(stored) == event
