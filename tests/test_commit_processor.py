"""Tests for commit message analysis"""

import unittest

from annual_review.github.commit_processor import (
    STOP_WORDS,
    analyze_commit_messages,
    classify_commit,
    commit_title,
    extract_words,
)


class TestCommitHelpers(unittest.TestCase):
    """Test title, word and type helpers"""

    def test_title_is_first_line(self):
        self.assertEqual(commit_title("Fix parser\n\nLonger body"), "Fix parser")
        self.assertEqual(commit_title("single"), "single")

    def test_extract_words(self):
        """Test punctuation, short words and stop words are dropped"""
        words = extract_words("fix(api): Handle the NULL token in v2 of login")

        self.assertEqual(words, ["fix", "api", "handle", "null", "token", "login"])

    def test_classification_order(self):
        """Test the first matching pattern wins"""
        self.assertEqual(classify_commit("feat: add dark mode")[0], "Feature")
        self.assertEqual(classify_commit("refactor state")[0], "Refactor")
        self.assertEqual(classify_commit("Add README")[0], "Add")
        self.assertEqual(classify_commit("Initial commit")[0], "Init")
        self.assertEqual(classify_commit("Merge pull request #4")[0], "Merge")
        self.assertEqual(classify_commit("xyz unrelated"), ("Other", "#484f58"))

    def test_classification_is_anchored(self):
        """Test keywords only count at the start of the title"""
        self.assertEqual(classify_commit("quick fix for login")[0], "Other")


class TestAnalyzeCommitMessages(unittest.TestCase):
    """Test commit insights"""

    def test_empty_messages(self):
        """Test no messages gives zeroed insights"""
        insights = analyze_commit_messages([])

        self.assertEqual(insights.total_commit_messages, 0)
        self.assertEqual(insights.word_frequency, ())
        self.assertEqual(insights.commit_types, ())
        self.assertEqual(insights.average_message_length, 0)
        self.assertEqual(insights.longest_message, "")
        self.assertEqual(insights.most_active_hour, 0)
        self.assertEqual(insights.commits_by_hour, (0,) * 24)

    def test_word_frequency(self):
        """Test words are counted across titles"""
        insights = analyze_commit_messages(["Fix login bug", "fix another login issue"])

        counts = {w.word: w.count for w in insights.word_frequency}
        self.assertEqual(counts["login"], 2)
        self.assertEqual(counts["fix"], 2)
        self.assertEqual(insights.word_frequency[0].count, 2)
        # 7 counted words in total
        login = next(w for w in insights.word_frequency if w.word == "login")
        self.assertAlmostEqual(login.percentage, 2 / 7 * 100)

    def test_stop_words_and_body_ignored(self):
        """Test stop words and message bodies never reach the word list"""
        insights = analyze_commit_messages([
            "Update the docs for this release\n\nbodyword bodyword bodyword",
            "Move all of the files",
        ])

        words = {w.word for w in insights.word_frequency}
        self.assertFalse(words & STOP_WORDS)
        self.assertNotIn("bodyword", words)
        self.assertIn("release", words)

    def test_word_list_capped(self):
        """Test at most 30 words are kept"""
        messages = [f"word{i}xx" for i in range(50)]

        self.assertEqual(len(analyze_commit_messages(messages).word_frequency), 30)

    def test_commit_types(self):
        """Test types are counted and sorted by count"""
        insights = analyze_commit_messages([
            "feat: add dark mode",
            "fix: crash on start",
            "fix: typo",
            "something else",
        ])

        types = [(t.type, t.count) for t in insights.commit_types]
        self.assertEqual(types[0], ("Fix", 2))
        self.assertIn(("Feature", 1), types)
        self.assertIn(("Other", 1), types)
        self.assertNotIn("Add", [t.type for t in insights.commit_types])

    def test_other_omitted_when_all_match(self):
        """Test the Other type only appears when needed"""
        insights = analyze_commit_messages(["docs: readme", "chore: bump"])

        self.assertNotIn("Other", [t.type for t in insights.commit_types])

    def test_length_statistics(self):
        """Test average and longest title"""
        long_title = "x" * 150
        insights = analyze_commit_messages(["abc", "abcd", long_title + "\nbody"])

        self.assertEqual(insights.total_commit_messages, 3)
        # (3 + 4 + 150) / 3 = 52.33
        self.assertEqual(insights.average_message_length, 52)
        self.assertEqual(insights.longest_message, "x" * 100)

    def test_average_rounds_half_up(self):
        self.assertEqual(analyze_commit_messages(["ab", "abc"]).average_message_length, 3)


if __name__ == "__main__":
    unittest.main()
