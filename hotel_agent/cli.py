"""
Command line entry point.

    hotel-agent tools                          list the tools
    hotel-agent call hotel_list_by_city '{"cityCode": "PAR"}'
    hotel-agent mcp                            JSON-RPC over stdin/stdout
    hotel-agent serve --port 8000              HTTP API (see web_server.py)
"""
import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from hotel_agent.config import Config, setup_logging
from hotel_agent.main import build_server
from hotel_agent.mcp.protocol import INVALID_REQUEST, PARSE_ERROR, JsonRpcRequest, JsonRpcResponse

logger = logging.getLogger(__name__)


def list_tools(server) -> int:
    for tool in server.list_tools():
        print(f"{tool['name']}: {tool['description']}")
    return 0


async def call_tool(server, name: str, raw_arguments: str) -> int:
    try:
        arguments = json.loads(raw_arguments) if raw_arguments else {}
    except json.JSONDecodeError as e:
        print(f"Error: arguments are not valid JSON: {e}", file=sys.stderr)
        return 2

    if name not in server.tools:
        print(f"Error: unknown tool {name}", file=sys.stderr)
        return 2

    result = await server.tools[name](arguments)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.ok else 1


async def serve_stdio(server, stdin=None, stdout=None) -> int:
    """Answer one JSON-RPC request per input line until EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        response = await _answer(server, line)
        stdout.write(json.dumps(response.to_dict()) + "\n")
        stdout.flush()
    return 0


async def _answer(server, line: str) -> JsonRpcResponse:
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as e:
        return JsonRpcResponse.failure(PARSE_ERROR, f"Parse error: {e}")

    try:
        request = JsonRpcRequest.model_validate(payload)
    except ValidationError as e:
        request_id = payload.get("id") if isinstance(payload, dict) else None
        if not isinstance(request_id, (str, int)):
            request_id = None
        return JsonRpcResponse.failure(INVALID_REQUEST, f"Invalid Request: {e}", request_id)

    return await server.handle_request(request)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotel-agent", description="Amadeus hotel tools for LLM agents.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("tools", help="List the available tools.")

    call = sub.add_parser("call", help="Run one tool and print its JSON result.")
    call.add_argument("name")
    call.add_argument("arguments", nargs="?", default="", help="JSON object of tool arguments.")

    sub.add_parser("mcp", help="Serve JSON-RPC requests over stdio.")

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "mcp":
        # stdout carries the JSON-RPC stream
        setup_logging(stream=sys.stderr)
    elif args.command == "call":
        # stdout carries the JSON result
        setup_logging(stream=sys.stderr)
        Config.validate(stream=sys.stderr)
    else:
        setup_logging()
        Config.validate()

    server = build_server()

    if args.command == "tools":
        return list_tools(server)
    if args.command == "call":
        return asyncio.run(call_tool(server, args.name, args.arguments))
    if args.command == "mcp":
        return asyncio.run(serve_stdio(server))
    if args.command == "serve":
        import uvicorn
        uvicorn.run("web_server:app", host=args.host, port=args.port)
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
