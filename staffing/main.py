import argparse
import logging
import sys
from pathlib import Path

from staffing.utilities.config import APP_HOST, APP_PORT, JUNIOR_WAGE_LIMIT, LOG_LEVEL


def _report(args) -> int:
    from staffing.infra.Planning_Repository import import_from_json
    from staffing.infra.pdf_utils import generate_pdf_for_statistics
    from staffing.logic.reporting.statistics import PlanningStatistics
    from staffing.utilities.export_import import PlanningExporter

    plan = import_from_json(args.file)
    if plan is None:
        print(f"✗ Could not load planning file: {args.file}")
        return 1
    stats = PlanningStatistics(plan)
    stats.print_report(args.max_wage)
    if args.json:
        result = PlanningExporter(plan).export_statistics(Path(args.json), args.max_wage)
        print(f"✓ Statistics saved to: {result}")
    if args.pdf:
        Path(args.pdf).write_bytes(generate_pdf_for_statistics(stats.generate_report(args.max_wage)))
        print(f"✓ PDF report saved to: {args.pdf}")
    return 0


def _serve(args) -> int:
    import uvicorn
    from staffing.api.api_run import app

    print(f"Uvicorn running on http://localhost:{args.port} (Press CTRL+C to quit)")
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Staffing plan statistics')
    sub = parser.add_subparsers(dest='command', required=True)

    report = sub.add_parser('report', help='Print the statistics of a planning file')
    report.add_argument('file', help='Planning file (path or name in the data directory)')
    report.add_argument('--max-wage', type=int, default=JUNIOR_WAGE_LIMIT,
                        help='Hourly wage limit of the managed budget overview')
    report.add_argument('--json', help='Also save the statistics as JSON')
    report.add_argument('--pdf', help='Also save the statistics as PDF')
    report.set_defaults(handler=_report)

    serve = sub.add_parser('serve', help='Run the HTTP API')
    serve.add_argument('--host', default=APP_HOST)
    serve.add_argument('--port', type=int, default=APP_PORT)
    serve.set_defaults(handler=_serve)

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
