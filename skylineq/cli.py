"""Command line front end running one skyline strategy on a CSV dataset."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence

from skylineq.dataset import Product, read_products, summarize, totals_by_label
from skylineq.skyline import (
    skyline_array,
    skyline_linked_list,
    skyline_map,
    skyline_queue,
    skyline_stack,
)

_PRODUCT_FILE = "ind_1000_2_product.csv"


def _run_array(path: str) -> None:
    start = time.perf_counter()
    products = read_products(path)
    skyline_array(products)
    summary = summarize(products)
    elapsed = time.perf_counter() - start
    print(f"Jumlah baris diproses: {summary.rows}")
    print(f"Total keseluruhan attr_1: {summary.total_attr_1}")
    print(f"Total keseluruhan attr_2: {summary.total_attr_2}")
    print(f"Waktu eksekusi: {elapsed:g} detik")


def _run_hashtable(path: str) -> None:
    start = time.perf_counter()
    products = read_products(path)
    totals = totals_by_label(products).values()
    total_1 = sum(t.attr1_sum for t in totals)
    total_2 = sum(t.attr2_sum for t in totals)
    elapsed = time.perf_counter() - start
    print(f"Jumlah baris diproses: {len(products)}")
    print(f"Total attr_1: {total_1}")
    print(f"Total attr_2: {total_2}")
    print(f"Waktu eksekusi: {elapsed:g} detik")


def _timed(
    algorithm: Callable[[list[Product]], list[Product]], products: list[Product]
) -> tuple[list[Product], float]:
    start = time.perf_counter()
    result = algorithm(products)
    return result, time.perf_counter() - start


def _print_id_price_review(title: str, result: list[Product], elapsed: float) -> None:
    print(title)
    for p in result:
        print(f"ID: {p.id}, Price: {p.price}, Review: {p.review}")
    print(f"Time taken: {int(elapsed * 1_000_000)} microseconds")


def _run_linked_list(path: str) -> None:
    result, elapsed = _timed(skyline_linked_list, read_products(path))
    _print_id_price_review("Skyline Products (Linked List):", result, elapsed)


def _run_map(path: str) -> None:
    result, elapsed = _timed(skyline_map, read_products(path))
    _print_id_price_review("Skyline Products:", result, elapsed)


def _run_queue(path: str) -> None:
    result, elapsed = _timed(skyline_queue, read_products(path))
    print("Skyline Set (menggunakan Queue - Vector):")
    for p in result:
        print(f"{p.label} | Harga: {p.attr_1} | Ulasan: {p.attr_2}")
    print()
    print(f"Waktu eksekusi: {elapsed * 1000:g} ms")


def _run_stack(path: str) -> None:
    result, elapsed = _timed(skyline_stack, read_products(path))
    print(f"Waktu eksekusi skylineQueryDenganStack: {elapsed:g} detik")
    print()
    print("Hasil Skyline (pakai stack):")
    for p in result:
        print(f"- Harga: {p.attr_1}, Ulasan: {p.attr_2}")


_METHODS: dict[str, tuple[Callable[[str], None], str]] = {
    "array": (_run_array, "dataset.csv"),
    "hashtable": (_run_hashtable, _PRODUCT_FILE),
    "linked-list": (_run_linked_list, _PRODUCT_FILE),
    "map": (_run_map, _PRODUCT_FILE),
    "queue": (_run_queue, _PRODUCT_FILE),
    "stack": (_run_stack, _PRODUCT_FILE),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen strategy and print its report; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="skylineq", description="Run a skyline query over a product CSV file."
    )
    parser.add_argument("method", choices=list(_METHODS))
    parser.add_argument("path", nargs="?", help="CSV file (default depends on method)")
    args = parser.parse_args(argv)

    runner, default_path = _METHODS[args.method]
    path = args.path or default_path
    try:
        runner(path)
    except OSError:
        print(f"Gagal membuka file: {path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())