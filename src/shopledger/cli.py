"""
shopledger command line interface.

Usage:
    shopledger serve                          Start the HTTP API
    shopledger add-item NAME PRICE QTY        Add an item or restock it
    shopledger update-price NAME PRICE        Record a new price point
    shopledger set-qty NAME QTY               Overwrite stock of a month
    shopledger sell ITEM PRICE QTY ...        Record a sale
    shopledger items [--search TEXT]          List items for a month
    shopledger report [MONTH]                 Monthly receipt (refreshes snapshot)
    shopledger sales [MONTH]                  Sales report
    shopledger yearly YEAR                    Yearly summary
    shopledger export-receipt [MONTH]         Write receipt_<month>.txt
    shopledger export-sales [MONTH]           Write sales_<month>.txt
    shopledger print {monthly,sales,yearly}   Write a printable PDF
"""

import argparse
import subprocess
import sys
from pathlib import Path

from shopledger.application.ledger_service import LedgerService
from shopledger.application.services import get_ledger_service
from shopledger.config import configure_logging, get_settings
from shopledger.core.exceptions import LedgerError
from shopledger.core.periods import parse_month
from shopledger.infrastructure.export import format_amount
from shopledger.infrastructure.storage import JsonFileLedgerStore


def _service(args: argparse.Namespace) -> LedgerService:
    if args.ledger:
        return get_ledger_service(JsonFileLedgerStore(Path(args.ledger)))
    return get_ledger_service()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server with uvicorn."""
    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port
    uvicorn_cmd = [
        sys.executable, "-m", "uvicorn",
        "shopledger.api.main:app",
        "--host", host,
        "--port", str(port),
    ]
    if args.reload:
        uvicorn_cmd.append("--reload")

    print(f"Starting server on {host}:{port}...")
    print(f"  API docs: http://{host}:{port}/docs")
    subprocess.run(uvicorn_cmd, check=False)


def cmd_add_item(args: argparse.Namespace) -> None:
    item = _service(args).add_item(args.name, args.price, args.qty, args.date)
    print(f"Saved {item.name}.")


def cmd_update_price(args: argparse.Namespace) -> None:
    item = _service(args).update_price(args.name, args.price, args.date)
    print(f"{item.name}: price {format_amount(args.price)} recorded.")


def cmd_set_qty(args: argparse.Namespace) -> None:
    month = parse_month(args.month)
    qty = _service(args).set_quantity(args.name, month, args.qty)
    print(f"{args.name} [{month}]: {qty}")


def cmd_sell(args: argparse.Namespace) -> None:
    sale = _service(args).record_sale(
        sale_date=args.date,
        buyer=args.buyer,
        address=args.address,
        contact=args.contact,
        item_name=args.item,
        price=args.price,
        qty=args.qty,
        manual_profit_per_unit=args.profit,
    )
    print(
        f"Sold {sale.qty} x {sale.item} for {format_amount(sale.total)} "
        f"(profit {format_amount(sale.profit)})."
    )


def cmd_items(args: argparse.Namespace) -> None:
    listing = _service(args).list_items(search=args.search, month=args.month)
    print(f"Items for {listing.month}")
    print("Item\tPrice\tQty\tTotal")
    for row in listing.items:
        print(f"{row.name}\t{format_amount(row.price)}\t{row.qty}\t{format_amount(row.total)}")
    print(f"Grand Total\t\t\t{format_amount(listing.grand_total)}")


def cmd_report(args: argparse.Namespace) -> None:
    print(_service(args).render_receipt_text(args.month))


def cmd_sales(args: argparse.Namespace) -> None:
    print(_service(args).render_sales_text(args.month))


def cmd_yearly(args: argparse.Namespace) -> None:
    report = _service(args).yearly_report(args.year)
    print(f"Yearly Summary - {report.year}")
    print("Month\tItems Total\tSales Revenue\tSales Profit\tCombined")
    for row in report.months:
        print(
            f"{row.month}\t{format_amount(row.items_total)}\t{format_amount(row.sales_total)}"
            f"\t{format_amount(row.sales_profit)}\t{format_amount(row.combined)}"
        )
    t = report.totals
    print(
        f"Totals\t{format_amount(t.items)}\t{format_amount(t.sales)}"
        f"\t{format_amount(t.profit)}\t{format_amount(t.combined)}"
    )


def cmd_export_receipt(args: argparse.Namespace) -> None:
    path = _service(args).export_receipt(args.month, args.output)
    print(f"Receipt written to {path}")


def cmd_export_sales(args: argparse.Namespace) -> None:
    path = _service(args).export_sales(args.month, args.output)
    print(f"Sales report written to {path}")


def cmd_print(args: argparse.Namespace) -> None:
    service = _service(args)
    output_dir = Path(args.output) if args.output else get_settings().export.output_dir

    if args.kind == "yearly":
        if not args.period or not args.period.isdigit():
            print("print yearly requires a YEAR argument.", file=sys.stderr)
            sys.exit(2)
        content = service.render_yearly_pdf(int(args.period))
        filename = f"yearly_{args.period}.pdf"
    else:
        month = parse_month(args.period)
        if args.kind == "monthly":
            content = service.render_monthly_pdf(month)
            filename = f"receipt_{month}.pdf"
        else:
            content = service.render_sales_pdf(month)
            filename = f"sales_{month}.pdf"

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_bytes(content)
    print(f"PDF written to {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopledger",
        description="Shop inventory, sales and reporting ledger",
    )
    parser.add_argument("--ledger", help="Path to a ledger JSON file (overrides settings)")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("serve", help="Start the HTTP API")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.add_argument("--reload", action="store_true")
    p.set_defaults(func=cmd_serve)

    p = sub.add_parser("add-item", help="Add an item or restock it")
    p.add_argument("name")
    p.add_argument("price", type=float)
    p.add_argument("qty", type=int)
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today)")
    p.set_defaults(func=cmd_add_item)

    p = sub.add_parser("update-price", help="Record a new price point")
    p.add_argument("name")
    p.add_argument("price", type=float)
    p.add_argument("--date", default=None)
    p.set_defaults(func=cmd_update_price)

    p = sub.add_parser("set-qty", help="Overwrite stock of a month")
    p.add_argument("name")
    p.add_argument("qty", type=int)
    p.add_argument("--month", default=None)
    p.set_defaults(func=cmd_set_qty)

    p = sub.add_parser("sell", help="Record a sale")
    p.add_argument("item")
    p.add_argument("price", type=float)
    p.add_argument("qty", type=int)
    p.add_argument("--buyer", required=True)
    p.add_argument("--address", required=True)
    p.add_argument("--contact", required=True)
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    p.add_argument("--profit", type=float, default=None, help="Manual profit per unit")
    p.set_defaults(func=cmd_sell)

    p = sub.add_parser("items", help="List items")
    p.add_argument("--search", default=None)
    p.add_argument("--month", default=None)
    p.set_defaults(func=cmd_items)

    for name, func, help_text in (
        ("report", cmd_report, "Monthly receipt"),
        ("sales", cmd_sales, "Sales report"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("month", nargs="?", default=None)
        p.set_defaults(func=func)

    p = sub.add_parser("yearly", help="Yearly summary")
    p.add_argument("year", type=int)
    p.set_defaults(func=cmd_yearly)

    for name, func, help_text in (
        ("export-receipt", cmd_export_receipt, "Write receipt_<month>.txt"),
        ("export-sales", cmd_export_sales, "Write sales_<month>.txt"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("month", nargs="?", default=None)
        p.add_argument("--output", type=Path, default=None, help="Output directory")
        p.set_defaults(func=func)

    p = sub.add_parser("print", help="Write a printable PDF")
    p.add_argument("kind", choices=["monthly", "sales", "yearly"])
    p.add_argument("period", nargs="?", default=None, help="Month (YYYY-MM) or year")
    p.add_argument("--output", type=Path, default=None, help="Output directory")
    p.set_defaults(func=cmd_print)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(level="WARNING")
    try:
        args.func(args)
    except LedgerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
