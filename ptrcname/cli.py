import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config import Config, RESOLVER_BACKENDS
from .context import Context
from .enrichment import build_resolver
from .errors import PtrCnameError
from .logging_config import init_logging
from .models import Endpoint
from .output import ConsoleOutput, JsonExporter
from .source import EventHandler, Source, build_source, new_service_cname_source


console = Console()


class _SnapshotSource(Source):
    """Remembers type and first target of what the inner source produced"""

    def __init__(self, source: Source):
        self.source = source
        self.before: list[tuple[str, Optional[str]]] = []

    def endpoints(self, ctx: Context) -> list[Endpoint]:
        endpoints = self.source.endpoints(ctx)
        self.before = [
            (ep.record_type, ep.targets[0] if ep.targets else None)
            for ep in endpoints
        ]
        return endpoints

    def add_event_handler(self, ctx: Context, handler: EventHandler):
        self.source.add_event_handler(ctx, handler)

    def changed(self, endpoints: list[Endpoint]) -> set[int]:
        """Indexes of endpoints that differ from the snapshot"""
        return {
            i for i, (ep, (record_type, target)) in enumerate(zip(endpoints, self.before))
            if ep.record_type != record_type or ep.targets[0] != target
        }


def _close(obj):
    close = getattr(obj, 'close', None)
    if callable(close):
        close()


@click.command(context_settings={'auto_envvar_prefix': 'PTRCNAME'})
@click.argument('source')
@click.option('-n', '--namespace', default='',
              help='Namespace the source is scoped to (informational)')
@click.option('-r', '--resolver', default='dns',
              type=click.Choice(RESOLVER_BACKENDS, case_sensitive=False),
              help='Reverse lookup backend (default: dns)')
@click.option('--nameserver', 'nameservers', multiple=True,
              help='Nameserver for the dns backend (repeatable)')
@click.option('-w', '--lookup-timeout', type=float, default=None,
              help='Timeout per reverse lookup in seconds (default: resolver default)')
@click.option('--source-timeout', type=float, default=5.0,
              help='Timeout for HTTP sources in seconds (default: 5)')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export results to JSON file')
@click.option('-v', '--verbose', count=True,
              help='Log more (-v info, -vv debug)')
@click.option('--log-file', type=click.Path(),
              help='Also write log records to this file')
@click.version_option(version=__version__)
def main(source: str, namespace: str, resolver: str, nameservers: tuple,
         lookup_timeout: Optional[float], source_timeout: float,
         json_path: Optional[str], verbose: int, log_file: Optional[str]):
    """
    ptrcname - publish PTR names of endpoint targets as CNAME records.

    Read endpoints from SOURCE (a JSON file or an http(s) URL), look up
    the PTR record of each endpoint's first target and show the
    endpoints as they would be published.

    Examples:

        ptrcname endpoints.json

        ptrcname https://controller.local/endpoints --nameserver 10.0.0.53

        ptrcname endpoints.json -w 2 --json result.json
    """
    try:
        cfg = Config(
            source=source,
            namespace=namespace,
            resolver=resolver.lower(),
            nameservers=list(nameservers),
            lookup_timeout=lookup_timeout,
            source_timeout=source_timeout,
            json_path=json_path,
            verbosity=verbose,
            log_file=log_file,
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    init_logging(cfg.log_level, cfg.log_file)

    output = ConsoleOutput(console)
    ctx = Context()
    inner = build_source(cfg.source, timeout=cfg.source_timeout)
    address_resolver = build_resolver(cfg.resolver, cfg.lookup_timeout, cfg.nameservers)

    try:
        snapshot = _SnapshotSource(inner)
        cname_source = new_service_cname_source(
            ctx, None, cfg.namespace, snapshot, resolver=address_resolver
        )

        output.print_header(cfg.source, cfg.resolver, cfg.lookup_timeout)

        endpoints = cname_source.endpoints(ctx)
        rewritten = snapshot.changed(endpoints)

        output.print_endpoints(endpoints, rewritten)
        output.print_summary(len(endpoints), len(rewritten))

        if cfg.json_path:
            json_file = Path(cfg.json_path)
            JsonExporter(source=cfg.source).export(endpoints, rewritten, json_file)
            console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")

    except PtrCnameError as e:
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        ctx.cancel()
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)
    except Exception as e:
        output.print_error(f"Unexpected error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    finally:
        _close(inner)
        _close(address_resolver)


if __name__ == '__main__':
    main()
