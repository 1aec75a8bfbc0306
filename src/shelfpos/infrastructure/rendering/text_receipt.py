"""Plain-text receipt and table rendering for the terminal."""

from __future__ import annotations

from shelfpos.application.dto import ItemDTO, ReceiptDTO

_RULE = "-" * 35
_BANNER = "=" * 35


def render_receipt(receipt: ReceiptDTO, store_name: str) -> str:
    date, time = receipt.timestamp.split(" ")
    lines = [
        _BANNER,
        f"{store_name.upper() + ' RECEIPT':^35}",
        _BANNER,
        f"Date: {date} Time: {time}",
        "",
        f"{'Item Name':<15} {'Qty':<5} {'Unit':<6} {'Total':>6}",
        _RULE,
    ]
    for line in receipt.lines:
        lines.append(
            f"{line.name:<15} {line.quantity:<5} {line.unit_price:<6} {line.line_total:>6}"
        )
    lines += [
        _RULE,
        f"{'Subtotal:':<25}{receipt.subtotal} {receipt.currency}",
        f"{'Cash:':<25}{receipt.tendered} {receipt.currency}",
        f"{'Change:':<25}{receipt.change} {receipt.currency}",
        _RULE,
        "Thank you for shopping with us!",
        _BANNER,
    ]
    return "\n".join(lines)


def render_item_table(items: list[ItemDTO]) -> str:
    """Boxed table with columns sized to the widest value."""
    id_width = max([4] + [len(i.id) for i in items])
    name_width = max([10] + [len(i.name) for i in items])
    category_width = max([10] + [len(i.category) for i in items])
    rule = "-" * (id_width + name_width + category_width + 8 + 10 + 16)
    rows = [
        rule,
        f"| {'ID':<{id_width}} | {'Name':<{name_width}} | {'Category':<{category_width}} "
        f"| {'Quantity':>8} | {'Price':>10} |",
        rule,
    ]
    for i in items:
        rows.append(
            f"| {i.id:<{id_width}} | {i.name:<{name_width}} | {i.category:<{category_width}} "
            f"| {i.quantity:>8} | {i.price:>10} |"
        )
    rows.append(rule)
    return "\n".join(rows)
