from curator.models.activity import ActionKind, ActionLog, ActionLogEntry


def _entry(title: str, action: ActionKind = ActionKind.PLAY, detail: str | None = None) -> ActionLogEntry:
    return ActionLogEntry(action=action, content_title=title, detail=detail)


class TestActionLog:
    def test_newest_entry_first(self):
        log = ActionLog().record(_entry("first")).record(_entry("second"))

        assert [entry.content_title for entry in log.entries] == ["second", "first"]

    def test_capacity_evicts_oldest(self):
        log = ActionLog()
        for index in range(130):
            log = log.record(_entry(f"item-{index}"))

        assert len(log) == 100
        assert log.entries[0].content_title == "item-129"
        assert log.entries[-1].content_title == "item-30"

    def test_record_leaves_previous_log_untouched(self):
        original = ActionLog().record(_entry("kept"))
        updated = original.record(_entry("new"))

        assert len(original) == 1
        assert len(updated) == 2
        assert updated.entries[1] is original.entries[0]

    def test_distinct_entries_are_most_recent_first(self):
        log = ActionLog()
        for title in ["A", "B", "A", "C", "B"]:
            log = log.record(_entry(title, ActionKind.LIKE))
        log = log.record(_entry("D", ActionKind.PLAY))

        liked = [entry.content_title for entry in log.distinct_entries(ActionKind.LIKE)]

        assert liked == ["B", "C", "A"]

    def test_high_interest_titles(self):
        log = ActionLog()
        log = log.record(_entry("liked", ActionKind.LIKE))
        log = log.record(_entry("finished", ActionKind.PLAY, ">85%"))
        log = log.record(_entry("sampled", ActionKind.PLAY, "50%"))
        log = log.record(_entry("shared", ActionKind.SHARE))

        assert log.high_interest_titles() == {"liked", "finished"}
        assert log.interacted_titles() == {"liked", "finished", "sampled", "shared"}

    def test_describe(self):
        assert _entry("Desert Storm", detail="75%").describe() == 'play on "Desert Storm" (75%)'
        assert _entry("Desert Storm", ActionKind.LIKE).describe() == 'like on "Desert Storm"'
