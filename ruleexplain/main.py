import argparse
import sys

from ruleexplain.authorization.factory import AuthorityFactory
from ruleexplain.authorization.session import AuthorizationSession, short_identity
from ruleexplain.channel.factory import ChannelFactory
from ruleexplain.channel.json_rpc_client import JsonRpcClient
from ruleexplain.config.settings import Settings
from ruleexplain.logging.logger import Log
from ruleexplain.orchestrator.models import (
    Found,
    StatusEvent,
    SubmissionStatus,
    TransientError,
)
from ruleexplain.orchestrator.orchestrator import RequestOrchestrator

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_TIMED_OUT = 2


def main(argv: list[str] | None = None) -> int:
    """Entry point: read clause -> build dependencies -> print the status stream."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    text = args.clause if args.clause is not None else sys.stdin.read()
    if not text.strip():
        print("Error: enter a clause to explain", file=sys.stderr)
        return EXIT_FAILED

    rpc_client = _build_rpc_client(settings)
    try:
        channel = ChannelFactory.create(settings, rpc_client)
        orchestrator = RequestOrchestrator(channel, settings)
        if args.check:
            return _check(orchestrator, text)
        session = AuthorizationSession(AuthorityFactory.create(settings, rpc_client))
        return _submit(orchestrator, session, text)
    finally:
        if rpc_client is not None:
            rpc_client.close()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ruleexplain",
        description="Get a plain-English explanation of a legal clause.",
    )
    parser.add_argument(
        "clause", nargs="?", help="clause text; read from stdin when omitted"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="only look up the explanation of a clause submitted earlier",
    )
    return parser.parse_args(argv)


def _build_rpc_client(settings: Settings) -> JsonRpcClient | None:
    """One client shared by channel and authority when either talks to the node."""
    providers = {settings.channel_provider.lower(), settings.authority_provider.lower()}
    if "rpc" not in providers:
        return None
    return JsonRpcClient(url=settings.rpc_url, timeout_seconds=settings.rpc_timeout_seconds)


def _submit(
    orchestrator: RequestOrchestrator, session: AuthorizationSession, text: str
) -> int:
    last: StatusEvent | None = None
    try:
        for event in orchestrator.submit_and_await(text, session):
            if event.status is SubmissionStatus.SUBMITTING:
                print(f"Account: {short_identity(session.identity())}", flush=True)
            print(event.message, flush=True)
            last = event
    except KeyboardInterrupt:
        orchestrator.cancel()
        print("Cancelled. The submitted transaction is not retracted.", flush=True)
        return EXIT_FAILED

    if last is None or last.status is SubmissionStatus.FAILED:
        return EXIT_FAILED
    if last.status is SubmissionStatus.TIMED_OUT:
        return EXIT_TIMED_OUT
    print()
    print(last.result)
    return EXIT_OK


def _check(orchestrator: RequestOrchestrator, text: str) -> int:
    outcome = orchestrator.check_result(text)
    if isinstance(outcome, Found):
        print(outcome.text)
        return EXIT_OK
    if isinstance(outcome, TransientError):
        Log.warning(f"Explanation lookup failed: {outcome.cause}")
    print("Explanation not available yet.")
    return EXIT_TIMED_OUT


if __name__ == "__main__":
    sys.exit(main())
