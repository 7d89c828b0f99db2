# esqueries/cli/search_cli.py
import argparse
import asyncio
import json
from dataclasses import replace

from esqueries.config import SearchConfig
from esqueries.client import SearchClient
from esqueries.mcp.tools import ToolName, dispatch


async def _run(tool: ToolName, arguments: dict, config: SearchConfig) -> int:
    client = SearchClient(config)
    try:
        result = await dispatch(tool.value, arguments, client)
    finally:
        await client.close()

    if result.is_error:
        print(f"Error ({result.error_code}): {result.text}")
        return 1

    lines = result.text.splitlines()
    print(f"{len(lines)} documents from {config.index}:")
    for i, line in enumerate(lines):
        print(f"\n{i+1}. " + json.dumps(json.loads(line), indent=2, ensure_ascii=False))
        print("-" * 80)
    return 0


def main():
    parser = argparse.ArgumentParser(description='Query the Elasticsearch index from the command line')
    parser.add_argument('--index', type=str,
                        help='Index to search (default: INDEX_NAME)')
    parser.add_argument('--top', type=int,
                        help='Maximum number of documents to show (default: ESQ_MAX_RESULTS or 10)')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Semantic search
    semantic_parser = subparsers.add_parser('semantic', help='Semantic search on the document text')
    semantic_parser.add_argument('query', type=str, help='Search query')

    # Date range
    date_parser = subparsers.add_parser('date', help='Documents issued within a date range')
    date_parser.add_argument('--from', dest='date_from', required=True,
                             help='Start date, inclusive (e.g. 2024-01-01)')
    date_parser.add_argument('--to', dest='date_to', required=True,
                             help='End date, inclusive (e.g. 2024-01-31)')

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    try:
        config = SearchConfig.from_env(index=args.index)
        if args.top is not None:
            config = replace(config, max_results=args.top)
    except ValueError as e:
        parser.error(str(e))

    if args.command == 'semantic':
        print(f"Semantic search for: '{args.query}'")
        status = asyncio.run(_run(ToolName.SEMANTIC_SEARCH, {"q": args.query}, config))
    else:
        print(f"Documents issued between {args.date_from} and {args.date_to}")
        status = asyncio.run(_run(ToolName.SEARCH_BY_DATE, {"from": args.date_from, "to": args.date_to}, config))

    raise SystemExit(status)


if __name__ == "__main__":
    main()
