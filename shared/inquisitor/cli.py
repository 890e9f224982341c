#!/usr/bin/env python3
"""
The Release Inquisition.

Compares the commits between two revisions of a git repository with the
Jira issues targeted at a fixVersion, and reports:

- every issue committed in the release (known to Jira or not)
- commits with no issue reference
- issue keys found in git that Jira does not have for the release
- issues Jira has for the release that no commit mentions

Usage:
    release-inquisitor ~/src/facter FACT 2.0.2 HEAD 2.1.0
"""

import argparse
import sys

import requests

from inquisitor_config import JiraConfig, ReleaseConfig
from inquisitor_logging import LOG_FORMATS, ContextScope, configure_logging, detect_color_support, get_logger
from inquisitor_logging.wrappers import GitWrapper

from .commits import parse_commit_log, read_commit_log
from .errors import ConfigError, FetchError, GitLogError, InputError
from .prompt import read_password
from .reconcile import ReconciliationResult, reconcile
from .render import print_report
from .tickets import fetch_known_tickets


logger = get_logger("release-inquisitor")

PROG = "release-inquisitor"

EXAMPLES = f"""\
Examples:
    # Set up credentials for interacting with JIRA
    export JIRA_USERNAME='adrien'

    # Inquire about all commits between the 2.0.2 tag and the latest commit of
    # the current branch, and compare against issues with a fixVersion of '2.1.0'
    # in the FACT project.
    {PROG} ~/src/facter FACT 2.0.2 HEAD 2.1.0

    # Inquire about all commits between the 3.6.2 tag and the 'master' branch,
    # and compare against issues with a fixVersion of '3.7.0' in the PUP project.
    {PROG} ~/src/puppet PUP 3.6.2 master 3.7.0

Environment:
    JIRA_USERNAME         Jira account name (required)
    JIRA_PASSWORD         Jira password (prompted for when unset)
    JIRA_BASE_URL         Jira site (default: https://tickets.puppetlabs.com)
    JIRA_REQUEST_TIMEOUT  HTTP timeout in seconds (default: 30)
"""


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str):
        sys.stderr.write(f"Error: {message}\n")
        self.print_help(sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog=PROG,
        description="Compare the commits of a release with the Jira issues of its fixVersion.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("repo_path", help="path to git repo")
    parser.add_argument("project", help="JIRA project key, e.g. FACT")
    parser.add_argument("from_rev", help="start commit (exclusive)")
    parser.add_argument("to_rev", help="end commit (inclusive)")
    parser.add_argument("fix_version", help="JIRA fixVersion, e.g. 2.1.0")
    parser.add_argument("--no-color", action="store_true", help="never colorize the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="console",
        help="format of log output on stderr (default: console)",
    )
    return parser


def load_configs(args: argparse.Namespace) -> tuple[ReleaseConfig, JiraConfig]:
    """Build and validate both configs.

    Raises:
        ConfigError: With every validation error found
    """
    release = ReleaseConfig(
        repo_path=args.repo_path,
        project=args.project,
        from_rev=args.from_rev,
        to_rev=args.to_rev,
        fix_version=args.fix_version,
    )
    jira = JiraConfig.from_env()

    errors: list[str] = []
    for config in (jira, release):
        result = config.validate()
        errors.extend(result.errors)
        for warning in result.warnings:
            logger.warning(warning)

    if errors:
        raise ConfigError(errors)

    logger.debug("Configuration loaded", jira=jira.to_dict(), release=release.to_dict())
    return release, jira


def audit_release(
    release: ReleaseConfig,
    jira: JiraConfig,
    session: requests.Session | None = None,
    git: GitWrapper | None = None,
) -> ReconciliationResult:
    """Fetch tickets, read the log and reconcile them."""
    with ContextScope(repository=str(release.repo_path), project=release.project, fix_version=release.fix_version):
        known_tickets = fetch_known_tickets(jira, release.project, release.fix_version, session=session)
        log_text = read_commit_log(release, git=git)
        groups = parse_commit_log(log_text, release.project)
        result = reconcile(groups, known_tickets)

        logger.info(
            "Release reconciled",
            known=len(result.committed_and_known),
            unknown=len(result.committed_unknown),
            unmarked=len(result.unmarked_commits),
            uncommitted=len(result.known_but_uncommitted),
        )
        return result


def run(
    release: ReleaseConfig,
    jira: JiraConfig,
    use_colors: bool = False,
    session: requests.Session | None = None,
    git: GitWrapper | None = None,
) -> int:
    """Log in, audit the release and print the report."""
    print(f"Logging in to {jira.base_url} as {jira.username}")
    if not jira.password:
        jira.password = read_password("Password please: ")
        print()

    result = audit_release(release, jira, session=session, git=git)
    print_report(result, use_colors=use_colors)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else "WARNING", log_format=args.log_format)

    try:
        release, jira = load_configs(args)
    except ConfigError as e:
        for error in e.errors:
            sys.stderr.write(f"Error: {error}\n")
        parser.print_help(sys.stderr)
        return 1

    use_colors = not args.no_color and detect_color_support(sys.stdout)

    try:
        return run(release, jira, use_colors=use_colors)
    except FetchError as e:
        sys.stderr.write(f"{e.describe()}\n")
        return 1
    except (InputError, GitLogError) as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())
