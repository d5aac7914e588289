# skylineq

`skylineq` runs skyline queries over two-attribute product datasets. A
product is in the skyline when no other product beats it on both attributes
at once. The first attribute (`attr_1`, the price) is better when lower. The
second (`attr_2`, the review score) is better when higher. One strategy,
`skyline_stack`, treats lower as better on both attributes.

## Input format

The input is a CSV file read as UTF-8. Its first line is a header and is
skipped. Every other row has at least four comma-separated columns:

```
id,label,attr_1,attr_2
1,shirt,120000,45
2,jacket,95000,40
```

Any columns after the fourth are ignored. `id`, `attr_1` and `attr_2` must
each begin with an integer in the signed 32-bit range. Leading whitespace is
allowed, and characters after the integer are ignored. A row with fewer than
four fields or with a bad number raises `ValueError`, and the message names
the line number.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Command line

```
skylineq METHOD [PATH]
```

`METHOD` is one of the names below. `PATH` is the CSV file. If you leave it
out, `array` reads `dataset.csv` and every other method reads
`ind_1000_2_product.csv` in the current directory.

| Method        | What it prints                                                           |
|---------------|--------------------------------------------------------------------------|
| `array`       | computes `skyline_array`, then prints the row count, the totals of both attributes and the elapsed seconds |
| `hashtable`   | prints the row count and the attribute totals, summed through the per-label totals, and the elapsed seconds |
| `linked-list` | each skyline product as `ID`, `Price` and `Review`, then the time in microseconds |
| `map`         | each product accepted by `skyline_map` in the same format, then the time in microseconds |
| `queue`       | each skyline product's label, price and review, then the time in milliseconds |
| `stack`       | the time in seconds, then each skyline product's price and review        |

The report texts are in Indonesian, for example `Jumlah baris diproses`
and `Waktu eksekusi`. If the file cannot be opened, the command prints
`Gagal membuka file: PATH` to standard error and exits with status 1. If a
row cannot be parsed, it prints the path and the error, and also exits with
status 1.

```
skylineq --help
```

The `array` mode computes the skyline but does not print it. Only its
summary is shown.

## Library use

```python
from skylineq.dataset import read_products, summarize, totals_by_label
from skylineq.skyline import skyline_array, skyline_map

products = read_products("dataset.csv")   # list[Product]

summary = summarize(products)             # Summary(rows, total_attr_1, total_attr_2)
per_label = totals_by_label(products)     # {label: LabelTotals(attr1_sum, attr2_sum)}

front = skyline_array(products)
```

### `skylineq.dataset`

- `Product(id, label, attr_1, attr_2)` is a frozen dataclass. `price` and
  `review` are aliases for `attr_1` and `attr_2`.
- `parse_products(lines)` parses an iterable of CSV lines. The first line is
  taken as the header.
- `read_products(path)` parses a CSV file.
- `totals_by_label(products)` sums both attributes for each label. The labels
  come back in the order they first appear.
- `summarize(products)` returns a `Summary` with the row count and the
  totals of both attributes.

### `skylineq.skyline`

Dominance tests:

- `dominates(a, b)`: `a` is no dearer and no worse reviewed than `b`, and
  strictly better in at least one of the two.
- `weakly_dominates(a, b)`: the same test, except that it also holds
  between equal products.
- `dominates_low(a, b)`: strict dominance where lower is better on both
  attributes.

Skyline strategies. Each takes an iterable of products and returns a list:

- `skyline_array`: a block-nested loop with strict dominance. Surviving
  products keep their order, and new members are appended.
- `skyline_queue`: the same result, taking candidates first-in first-out
  from a queue.
- `skyline_linked_list`: uses weak dominance, so a product equal to an
  existing member is dropped.
- `skyline_map`: keeps a price-ordered frontier. A product is rejected only
  when a strictly cheaper frontier entry has a review at least as good.
  Products come back in the order they were accepted, and none is withdrawn
  later. As a result, the list can hold products that a later product
  superseded.
- `skyline_stack`: uses `dominates_low`. The result is read from the top of
  the stack down.