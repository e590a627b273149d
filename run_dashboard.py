"""
Console dashboard for the spa.

Usage:
    python run_dashboard.py [--seed FILE] [--no-demo] [--today YYYY-MM-DD]
                            [--search TERM] [--json]
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Any, Sequence

import orjson
from structlog import get_logger

from spa_admin.application.use_cases import (
    DashboardView,
    build_dashboard,
    create_store,
)
from spa_admin.config import AppConfig, get_config
from spa_admin.domain.value_objects import Money
from spa_admin.infrastructure.logger import setup_logging
from spa_admin.utils.datetime_helpers import get_today


def setup_arg_parser(config: AppConfig) -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Show the spa dashboard for one day"
    )
    parser.add_argument(
        "--seed",
        type=Path,
        default=config.seed.seed_file,
        help="JSON seed file with clients, appointments, products and "
        "transactions",
    )
    parser.add_argument(
        "--no-demo",
        action="store_true",
        default=not config.seed.load_demo_data,
        help="Start from an empty store when no seed file is given",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD), defaults to the system date",
    )
    parser.add_argument(
        "--search",
        default=None,
        help="Only list clients whose name or email contains this text",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the dashboard as JSON instead of a text summary",
    )
    return parser


def view_to_dict(view: DashboardView) -> dict[str, Any]:
    return {
        "summary": view.summary.model_dump(mode="json"),
        "agenda": [
            apt.model_dump(mode="json", by_alias=True)
            for apt in view.todays_agenda
        ],
        "birthdays": [c.name for c in view.birthday_clients],
        "lowStock": [
            p.model_dump(mode="json", by_alias=True) for p in view.low_stock
        ],
        "recentTransactions": [
            t.model_dump(mode="json", by_alias=True)
            for t in view.recent_transactions
        ],
        "clients": [
            c.model_dump(mode="json", by_alias=True)
            for c in view.matching_clients
        ],
    }


def print_summary(view: DashboardView, config: AppConfig) -> None:
    """Print dashboard summary to console."""
    symbol = config.dashboard.currency_symbol
    summary = view.summary

    def money(value: float) -> str:
        if value < 0:
            return "-" + Money(-value).format(symbol)
        return Money(value).format(symbol)

    print("\n" + "_" * 80)
    print(f"\n{config.dashboard.business_name.upper()} - {summary.today}")
    print("_" * 80)

    print("\nINDICADORES:")
    print(f"  Ingresos mensuales: {money(summary.monthly_income)}")
    print(f"  Citas de hoy: {summary.todays_appointments}")
    print(f"  Clientes VIP: {summary.vip_clients}")
    print(f"  Stock en alerta: {summary.low_stock_products}")

    print("\nAGENDA DE HOY:")
    if not view.todays_agenda:
        print("  No hay citas programadas.")
    for apt in view.todays_agenda:
        print(
            f"  {apt.time}  {apt.client_name} - {apt.service} "
            f"[{apt.status.label}]"
        )

    if view.birthday_clients:
        print("\nCUMPLEAÑOS:")
        for client in view.birthday_clients:
            print(f"  {client.name}: cita de regalo disponible hoy")

    if view.low_stock:
        print("\nREPONER STOCK:")
        for product in view.low_stock:
            print(
                f"  {product.name}: {product.quantity} {product.unit} "
                f"(mínimo {product.min_stock})"
            )

    print("\nCONTABILIDAD:")
    print(f"  Ingresos totales: {money(summary.totals.total_income)}")
    print(f"  Gastos totales: {money(summary.totals.total_expense)}")
    print(f"  Balance: {money(summary.totals.balance)}")

    if summary.cash_flow:
        print("\nFLUJO DE CAJA:")
        for point in summary.cash_flow:
            print(
                f"  {point.date}: +{money(point.income)} "
                f"/ -{money(point.expense)}"
            )

    if view.recent_transactions:
        print("\nÚLTIMOS MOVIMIENTOS:")
        for t in view.recent_transactions:
            sign = "+" if t.is_income else ""
            print(
                f"  {t.transaction_date.isoformat()}  {sign}"
                f"{money(t.signed_amount)}  {t.description}"
            )

    print("\nCLIENTES:")
    for client in view.matching_clients:
        badges = []
        if client.is_vip:
            badges.append("VIP")
        if client in view.birthday_clients:
            badges.append("Cumpleaños")
        suffix = f" [{', '.join(badges)}]" if badges else ""
        print(f"  {client.name} ({client.phone}){suffix}")

    print("\n" + "_" * 80)
    print("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Main dashboard execution."""
    config = get_config()
    setup_logging(config.logger_adapter)
    logger = get_logger("run_dashboard.py")

    parser = setup_arg_parser(config)
    args = parser.parse_args(argv)

    today = args.today or get_today()

    try:
        store = create_store(
            seed_file=args.seed,
            load_demo_data=not args.no_demo,
            today=today,
        )
        view = build_dashboard(
            store,
            today=today,
            search_term=args.search,
            recent_transactions_limit=(
                config.dashboard.recent_transactions_limit
            ),
        )
    except Exception:
        logger.exception("Dashboard failed")
        return 1

    if args.json:
        sys.stdout.write(
            orjson.dumps(
                view_to_dict(view), option=orjson.OPT_INDENT_2
            ).decode("utf-8")
        )
        sys.stdout.write("\n")
    else:
        print_summary(view, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
