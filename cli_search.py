"""Terminal client for TEDB VAT rate searches."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from tedb.config import settings
from tedb.errors import TedbError
from tedb.models import MemberState, Rate, SearchCriteria, SearchResult
from tedb.search import VatSearchService

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def pretty_print_result(result: SearchResult) -> None:
    for country in result.results:
        state = country.memberState or MemberState()
        flag = " (historized)" if country.historized else ""
        print(f"{GREEN}{state.defaultCountryCode or '-'}{RESET} {state.name or ''} | {country.type or '-'}{flag}")
        for idx, entry in enumerate(country.rates or [], start=1):
            rate = entry.rate or Rate()
            value = rate.value
            value_repr = f"{value:.2f}%" if isinstance(value, (int, float)) else "-"
            codes = ", ".join(cn.code for cn in entry.cnCodes or [] if cn.code) or "-"
            print(
                f"  {idx:02d}. {value_repr} | {rate.type or '-'} | {entry.situationOn or '-'} | "
                f"{entry.category or '-'} | {codes}"
            )
            if entry.comment:
                print(f"      {entry.comment}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query VAT rates from the EU TEDB service")
    parser.add_argument("--country", action="append", default=[], help="Member state code, repeatable")
    parser.add_argument("--category", action="append", default=[], help="Category name, repeatable")
    parser.add_argument("--code", action="append", default=[], help="CN code, repeatable")
    parser.add_argument("--date-from", help="First day, YYYY/MM/DD (default: day before --date-to)")
    parser.add_argument("--date-to", help="Last day, YYYY/MM/DD (default: today)")
    parser.add_argument("--json", action="store_true", help="Print the raw normalized result as JSON")
    parser.add_argument("--cn-id", metavar="CODE", help="Only resolve the TEDB id of a CN code")
    return parser


def main(argv: Iterable[str] | None = None, service: VatSearchService | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.getLevelName(settings.log_level.upper()))
    service = service or VatSearchService()

    try:
        if args.cn_id:
            cn_id = service.lookup_cn_id(args.cn_id)
            print(cn_id if cn_id is not None else "-")
            return 0 if cn_id is not None else 1

        criteria = SearchCriteria(
            country_codes=args.country,
            date_from=args.date_from,
            date_to=args.date_to,
            categories=args.category,
            commodity_codes=args.code,
        )
        result = service.search(criteria)
    except TedbError as exc:
        print(f"{RED}error:{RESET} {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        pretty_print_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
