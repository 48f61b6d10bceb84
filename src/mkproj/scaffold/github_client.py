"""GitHubClient: wraps the `gh` CLI calls for repository creation and branch protection."""

DEFAULT_PROTECTED_BRANCH = "main"


class GitHubClient:
    """Wraps GitHub CLI (gh) calls.

    All calls go through _run_gh(), which delegates to the injected
    CommandRunner so that a failing gh call raises ExecutionError carrying
    gh's stderr verbatim.
    """

    def __init__(self, runner):
        self._runner = runner

    def _run_gh(self, args, failure_message, cwd=None):
        return self._runner.run("gh", args, failure_message, cwd=cwd)

    def create_repo(self, name: str, visibility: str, cwd: str) -> None:
        """Create a hosted repository for the local repo in cwd and add it as origin."""
        self._run_gh(
            ["repo", "create", name, f"--{visibility}",
             "--source", ".", "--remote", "origin"],
            f"Failed to create {visibility} GitHub repository {name}",
            cwd=cwd,
        )

    def protect_branch(self, owner: str, repo: str, branch: str = DEFAULT_PROTECTED_BRANCH) -> None:
        """Apply branch protection in a single administrative request.

        Requires pull requests with zero approvals (so the owner can merge
        their own PRs), enforces the rules for admins, and clears required
        status checks and push restrictions.
        """
        self._run_gh(
            ["api", "--method", "PUT",
             f"repos/{owner}/{repo}/branches/{branch}/protection",
             "-H", "Accept: application/vnd.github+json",
             "-F", "required_pull_request_reviews[required_approving_review_count]=0",
             "-F", "enforce_admins=true",
             "-F", "required_status_checks=null",
             "-F", "restrictions=null"],
            f"Failed to protect branch {branch} of {owner}/{repo}",
        )
