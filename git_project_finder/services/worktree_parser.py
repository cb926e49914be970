"""Parser for `git worktree list --porcelain` output.

Porcelain output is a sequence of records separated by a blank line. Each
record is a set of lines, most of them a keyword followed by a value:

    worktree /path/to/worktree
    HEAD 0123456789abcdef...
    branch refs/heads/branch-name
    locked optional reason
    prunable optional reason

Flag-only lines are ``bare`` and ``detached``. Unknown lines (``gitdir``...)
are ignored.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from git_project_finder.constants import BRANCH_PREFIXES
from git_project_finder.exceptions import MalformedWorktreeRecordError
from git_project_finder.models.worktree import WorktreeRecord

RECORD_SEPARATOR = "\n\n"


def normalize_branch_name(branch: str) -> str:
    """Strip ref namespaces from a branch name.

    Each prefix in BRANCH_PREFIXES is removed at most once, in order, so
    ``refs/remotes/origin/main`` and ``heads/main`` both become ``main``.
    """
    for prefix in BRANCH_PREFIXES:
        branch = branch.removeprefix(prefix)
    return branch


@dataclass(frozen=True)
class _LineRule:
    """Maps a recognised line to the value of one record field."""

    field: str
    matches: Callable[[str], bool]
    value: Callable[[str], Any]


def _keyword(keyword: str, field: str, convert: Callable[[str], Any] = str) -> _LineRule:
    """Rule for `<keyword> <value>` lines; the value must be non-empty."""
    prefix = f"{keyword} "
    return _LineRule(
        field=field,
        matches=lambda line: line.startswith(prefix) and len(line) > len(prefix),
        value=lambda line: convert(line[len(prefix):]),
    )


def _flag(field: str, matches: Callable[[str], bool]) -> _LineRule:
    return _LineRule(field=field, matches=matches, value=lambda line: True)


LINE_RULES: List[_LineRule] = [
    _keyword("worktree", "directory"),
    _keyword("branch", "branch", normalize_branch_name),
    _keyword("HEAD", "head"),
    _flag("is_detached", lambda line: line == "detached"),
    _flag("is_bare", lambda line: line == "bare"),
    _flag("is_locked", lambda line: line.startswith("locked")),
    _keyword("locked", "lock_reason"),
    _flag("is_prunable", lambda line: line.startswith("prunable")),
    _keyword("prunable", "prunable_reason"),
]


def _scan_block(block: str) -> Dict[str, Any]:
    """Collect field values from one record; the first matching line wins."""
    fields: Dict[str, Any] = {}
    for line in block.split("\n"):
        for rule in LINE_RULES:
            if rule.field not in fields and rule.matches(line):
                fields[rule.field] = rule.value(line)
    return fields


def parse_worktree_block(project_root: str, block: str) -> WorktreeRecord:
    """Parse a single porcelain record.

    Args:
        project_root: Configured root of the project the output belongs to
        block: Raw text of one record

    Returns:
        The parsed WorktreeRecord

    Raises:
        MalformedWorktreeRecordError: If the record has no worktree line
    """
    fields = _scan_block(block)

    # A worktree always has a directory
    directory: Optional[str] = fields.pop("directory", None)
    if not directory:
        raise MalformedWorktreeRecordError(block)

    return WorktreeRecord(
        directory=directory,
        is_main_worktree=directory == project_root,
        **fields,
    )


def parse_worktree_list(project_root: str, raw_output: str) -> List[WorktreeRecord]:
    """Parse the full output of `git worktree list --porcelain`.

    Args:
        project_root: Configured root of the project, compared verbatim with
            each record's directory to flag the main worktree
        raw_output: Captured standard output of the command

    Returns:
        Worktree records in output order

    Raises:
        MalformedWorktreeRecordError: If any record has no worktree line
    """
    blocks = [block for block in raw_output.split(RECORD_SEPARATOR) if block.strip()]
    return [parse_worktree_block(project_root, block) for block in blocks]
