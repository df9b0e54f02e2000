"""GitPython adapter for the operations the commit flow needs."""
from pathlib import Path
from typing import Optional, Sequence, Union

from git import Actor, Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError
from git.objects import Commit, Tree

from .exceptions import RepositoryError


class GitRepository:
    """Wraps a GitPython ``Repo``.

    Every GitPython failure is re-raised as ``RepositoryError`` with the
    original exception chained.

    Attributes:
        repo (Repo): The underlying GitPython repository
    """

    def __init__(self, repo: Repo):
        self.repo = repo

    @classmethod
    def open(cls, path: Union[str, Path] = ".") -> "GitRepository":
        """Open the repository containing ``path``, searching parent directories.

        Raises:
            RepositoryError: If ``path`` is not inside a git repository.
        """
        try:
            return cls(Repo(path, search_parent_directories=True))
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryError(f"No git repository found at {path}") from e

    @property
    def working_dir(self) -> Path:
        return Path(self.repo.working_dir)

    def author_signature(self) -> Actor:
        return Actor.author(self.repo.config_reader())

    def committer_signature(self) -> Actor:
        return Actor.committer(self.repo.config_reader())

    def head_commit(self) -> Optional[Commit]:
        """The commit HEAD points to, or None on an unborn branch."""
        if not self.repo.head.is_valid():
            return None
        return self.repo.head.commit

    def has_staged_changes(self) -> bool:
        """Whether the index differs from HEAD."""
        try:
            head = self.head_commit()
            if head is None:
                return bool(self.repo.index.entries)
            return bool(self.repo.index.diff(head))
        except (GitError, OSError, ValueError) as e:
            raise RepositoryError(f"Failed to read repository status: {e}") from e

    def write_index_tree(self) -> Tree:
        try:
            return self.repo.index.write_tree()
        except (GitError, OSError, ValueError) as e:
            raise RepositoryError(f"Failed to write tree from index: {e}") from e

    def create_commit(
        self,
        author: Actor,
        committer: Actor,
        message: str,
        tree: Tree,
        parents: Sequence[Commit],
    ) -> str:
        """Create a commit object and move HEAD to it.

        Returns:
            str: The hexsha of the new commit
        """
        try:
            commit = Commit.create_from_tree(
                self.repo,
                tree,
                message,
                parent_commits=list(parents),
                head=True,
                author=author,
                committer=committer,
            )
        except (GitError, OSError, ValueError) as e:
            raise RepositoryError(f"Failed to create commit: {e}") from e
        return commit.hexsha

    def reset_head(self, commit: str) -> None:
        """Soft-reset HEAD to ``commit``, keeping index and working tree."""
        try:
            self.repo.head.reset(commit=commit, index=False, working_tree=False)
        except (GitError, OSError, ValueError) as e:
            raise RepositoryError(f"Failed to reset HEAD to {commit}: {e}") from e
