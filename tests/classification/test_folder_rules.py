"""Tests for folder rules."""

from orchestrator.classification.categories import Category
from orchestrator.classification.folder_rules import FOLDER_RULES, match_folder_rules
from orchestrator.classification.rules import ComputedReason, StaticReason
from orchestrator.core.types import FileNode, NodeKind


def _folder(name: str, age=None, empty: bool = False) -> FileNode:
    children = [] if empty else [FileNode(name="file.dat", kind=NodeKind.FILE)]
    return FileNode(name=name, kind=NodeKind.FOLDER, children=children, age_days=age)


class TestRuleOrder:
    """Test the order of the folder rules."""

    def test_categories_in_order(self):
        """Test the documented rule order."""
        assert [rule.category for rule in FOLDER_RULES] == [
            Category.VACUUM_EMPTY,
            Category.VACUUM_TEMP,
            Category.ARCHIVE_STALE,
            Category.SDK_DOTNET,
            Category.CONFIG_DOTFILE,
        ]

    def test_only_staleness_reason_is_computed(self):
        """Test the reason variants of each rule."""
        kinds = [type(rule.reason) for rule in FOLDER_RULES]

        assert kinds == [
            StaticReason,
            StaticReason,
            ComputedReason,
            StaticReason,
            StaticReason,
        ]


class TestEmptyFolder:
    """Test the empty folder rule."""

    def test_empty_children(self):
        """Test a folder with an empty children list."""
        result = match_folder_rules(_folder("Empty_Project", empty=True))

        assert result.category == Category.VACUUM_EMPTY
        assert result.reason == "Empty Folder"

    def test_absent_children(self):
        """Test a folder with no children collection at all."""
        folder = FileNode(name="nothing", kind=NodeKind.FOLDER)

        assert match_folder_rules(folder).category == Category.VACUUM_EMPTY

    def test_empty_beats_staleness(self):
        """Test that an old empty folder is vacuumed, not archived."""
        result = match_folder_rules(_folder("OldProj", age=400, empty=True))

        assert result.category == Category.VACUUM_EMPTY

    def test_empty_dotnet_is_empty(self):
        """Test that emptiness is checked before the .dotnet rule."""
        result = match_folder_rules(_folder(".dotnet", empty=True))

        assert result.category == Category.VACUUM_EMPTY


class TestTempFolder:
    """Test the old temp folder rule."""

    def test_old_temp_folder(self):
        """Test a temp folder older than 30 days."""
        result = match_folder_rules(_folder("my-temp-build", age=45))

        assert result.category == Category.VACUUM_TEMP
        assert result.reason == "Old Temp Folder"

    def test_recent_temp_folder(self):
        """Test that a fresh temp folder is left alone."""
        assert match_folder_rules(_folder("my-temp-build", age=10)) is None

    def test_threshold_is_exclusive(self):
        """Test that exactly 30 days is not old."""
        assert match_folder_rules(_folder("temp", age=30)) is None
        assert match_folder_rules(_folder("temp", age=31)).category == Category.VACUUM_TEMP

    def test_match_is_case_sensitive(self):
        """Test that 'Temp' does not satisfy the substring check."""
        assert match_folder_rules(_folder("Temp", age=45)) is None

    def test_unknown_age_is_not_old(self):
        """Test that a missing age counts as zero."""
        assert match_folder_rules(_folder("temp_stuff")) is None


class TestStaleFolder:
    """Test the inactivity rule."""

    def test_stale_folder_reason_includes_age(self):
        """Test the computed reason."""
        result = match_folder_rules(_folder("Old_Unity_Prototype_v1", age=400))

        assert result.category == Category.ARCHIVE_STALE
        assert result.reason == "Inactive (400d)"
        assert result.target_path == "99_Archives/2024"

    def test_threshold_is_exclusive(self):
        """Test that exactly 365 days is not stale."""
        assert match_folder_rules(_folder("Projects", age=365)) is None
        assert match_folder_rules(_folder("Projects", age=366)).reason == "Inactive (366d)"

    def test_old_temp_wins_over_stale(self):
        """Test that the temp rule precedes staleness."""
        result = match_folder_rules(_folder("temp", age=500))

        assert result.category == Category.VACUUM_TEMP

    def test_dot_folders_are_never_stale(self):
        """Test that dot folders skip the staleness rule."""
        result = match_folder_rules(_folder(".cache", age=1000))

        assert result.category == Category.CONFIG_DOTFILE


class TestDotFolders:
    """Test the SDK and dotfile rules."""

    def test_dotnet_is_sdk(self):
        """Test that .dotnet wins over the generic dotfile rule."""
        result = match_folder_rules(_folder(".dotnet", age=300))

        assert result.category == Category.SDK_DOTNET
        assert result.reason == ".NET SDK"
        assert result.target_path == "02_Studio/SDKs"

    def test_old_dotnet_is_still_sdk(self):
        """Test that staleness does not apply to .dotnet."""
        assert match_folder_rules(_folder(".dotnet", age=900)).category == Category.SDK_DOTNET

    def test_dotfile_folder(self):
        """Test the generic dotfile rule."""
        result = match_folder_rules(_folder(".config", age=5))

        assert result.category == Category.CONFIG_DOTFILE
        assert result.reason == "Config Folder"

    def test_files_never_match(self):
        """Test that files are not subject to folder rules."""
        dotfile = FileNode(name=".zshrc", kind=NodeKind.FILE, age_days=5)

        assert match_folder_rules(dotfile) is None


class TestSkip:
    """Test skipping rules by category."""

    def test_skipped_rule_passes_to_next(self):
        """Test that a skipped rule does not end the search."""
        folder = _folder(".dotnet", empty=True)

        assert match_folder_rules(folder).category == Category.VACUUM_EMPTY
        skipped = match_folder_rules(folder, skip=(Category.VACUUM_EMPTY,))
        assert skipped.category == Category.SDK_DOTNET

    def test_skip_leaves_other_rules_alone(self):
        """Test that skipping one category keeps the rest active."""
        folder = _folder("cache_temp", age=45, empty=True)

        result = match_folder_rules(folder, skip=[Category.VACUUM_EMPTY])

        assert result.category == Category.VACUUM_TEMP
