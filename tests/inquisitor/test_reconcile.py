"""Tests for inquisitor.reconcile."""

from inquisitor.commits import UNMARKED, parse_commit_log
from inquisitor.reconcile import EXEMPT_TAGS, reconcile
from inquisitor.tickets import TicketRecord


def tickets(*keys, resolution="Fixed"):
    return {key: TicketRecord(key=key, summary=f"Summary of {key}", resolution=resolution) for key in keys}


class TestReconcileScenarios:
    """End-to-end scenarios over parsed logs."""

    def test_known_ticket_and_unmarked_commit(self):
        """Test one known ticket commit and one unmarked commit."""
        groups = parse_commit_log("abc123 [FACT-1] fix thing\ndef456 unrelated tweak\n", "FACT")

        result = reconcile(groups, tickets("FACT-1"))

        assert result.committed_and_known == ["FACT-1"]
        assert result.committed_unknown == [UNMARKED]
        assert [c.sha for c in result.unmarked_commits] == ["def456"]
        assert result.known_but_uncommitted == []

    def test_known_ticket_without_commit(self):
        """Test that a ticket no commit mentions is reported."""
        groups = parse_commit_log("abc123 [FACT-1] fix thing\n", "FACT")

        result = reconcile(groups, tickets("FACT-1", "FACT-2"))

        assert [t.key for t in result.known_but_uncommitted] == ["FACT-2"]

    def test_committed_ticket_unknown_to_jira(self, sample_log):
        """Test that a ticket key absent from Jira lands in committed_unknown."""
        groups = parse_commit_log(sample_log, "FACT")

        result = reconcile(groups, tickets("FACT-1"))

        assert result.committed_and_known == ["FACT-1"]
        assert "FACT-2" in result.committed_unknown
        assert result.untracked_keys == ["FACT-2"]

    def test_lower_case_commit_matches_ticket(self):
        """Test that ticket keys match regardless of the case they were written in."""
        groups = parse_commit_log("abc123 (fact-3) lower case\n", "FACT")

        result = reconcile(groups, tickets("FACT-3"))

        assert result.committed_and_known == ["FACT-3"]
        assert result.known_but_uncommitted == []

    def test_lower_case_ticket_keys_normalized(self):
        """Test that known ticket keys are compared upper-cased."""
        groups = parse_commit_log("abc123 [FACT-3] msg\n", "FACT")
        known = {"fact-3": TicketRecord(key="FACT-3", summary="s")}

        result = reconcile(groups, known)

        assert result.committed_and_known == ["FACT-3"]

    def test_empty_inputs(self):
        """Test that nothing in yields nothing out."""
        result = reconcile({}, {})

        assert result.committed_and_known == []
        assert result.committed_unknown == []
        assert result.unmarked_commits == []
        assert result.known_but_uncommitted == []


class TestNoteTags:
    """Tests for note tags and the exempt list."""

    def test_note_tags_are_unknown_but_not_untracked(self, sample_log):
        """Test that maint/packaging are unknown yet excluded from untracked keys."""
        groups = parse_commit_log(sample_log, "FACT")

        result = reconcile(groups, tickets("FACT-1", "FACT-2"))

        assert "maint" in result.committed_unknown
        assert "packaging" in result.committed_unknown
        assert result.untracked_keys == []

    def test_note_tag_never_matches_a_ticket(self):
        """Test that a note tag equal to a ticket key (upper-cased) is not matched."""
        groups = parse_commit_log("abc123 [maint] chore\n", "FACT")

        result = reconcile(groups, {"MAINT": TicketRecord(key="MAINT", summary="odd")})

        assert result.committed_and_known == []
        assert result.committed_unknown == ["maint"]
        assert [t.key for t in result.known_but_uncommitted] == ["MAINT"]

    def test_unmarked_note_tag_not_listed_as_unmarked_commit(self):
        """Test that a note tagged [unmarked] is kept out of the unmarked commits."""
        groups = parse_commit_log("aaa [unmarked] foo\nbbb plain subject\n", "FACT")

        result = reconcile(groups, {})

        assert [c.sha for c in result.groups[UNMARKED]] == ["aaa", "bbb"]
        assert [c.sha for c in result.unmarked_commits] == ["bbb"]
        assert result.untracked_keys == []

    def test_unusual_note_tag_is_untracked(self):
        """Test that note tags outside the exempt list are reported."""
        groups = parse_commit_log("abc123 [wip] half done\n", "FACT")

        result = reconcile(groups, {})

        assert result.untracked_keys == ["wip"]

    def test_exempt_tags(self):
        assert EXEMPT_TAGS == {"maint", "doc", "packaging", "unmarked"}


class TestOrdering:
    """Tests for ordering and determinism."""

    def test_groups_sorted_by_key(self, sample_log):
        """Test that groups are visited in sorted key order."""
        groups = parse_commit_log(sample_log, "FACT")

        result = reconcile(groups, tickets("FACT-1"))

        assert list(result.groups) == sorted(groups)
        assert result.committed_unknown == sorted(result.committed_unknown)

    def test_log_order_preserved_in_groups(self, sample_log):
        """Test that commits inside a group keep log order."""
        groups = parse_commit_log(sample_log, "FACT")

        result = reconcile(groups, tickets("FACT-1"))

        assert [c.sha for c in result.groups["FACT-1"]] == ["e4f5a6b", "1234abc"]

    def test_independent_of_ticket_order(self, sample_log):
        """Test that the order of known tickets does not change the result."""
        groups = parse_commit_log(sample_log, "FACT")
        forward = tickets("FACT-1", "FACT-5", "FACT-9")
        backward = dict(reversed(list(forward.items())))

        first = reconcile(groups, forward)
        second = reconcile(groups, backward)

        assert first.committed_and_known == second.committed_and_known
        assert first.committed_unknown == second.committed_unknown
        assert first.known_but_uncommitted == second.known_but_uncommitted
        assert [t.key for t in first.known_but_uncommitted] == ["FACT-5", "FACT-9"]

    def test_inputs_not_mutated(self, sample_log):
        """Test that reconcile leaves its inputs untouched."""
        groups = parse_commit_log(sample_log, "FACT")
        snapshot = {key: list(commits) for key, commits in groups.items()}

        reconcile(groups, tickets("FACT-1"))

        assert groups == snapshot
