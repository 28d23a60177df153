"""Serve the compiled artifact over HTTP."""

import uvicorn


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Serve dictionary.json for remote clients")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.set_defaults(func=run_serve)


def run_serve(args):
    uvicorn.run("offdict.server.main:app", host=args.host, port=args.port)
