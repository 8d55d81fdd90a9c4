"""Application layer: the demonstrated operations and ports. Depends only on domain."""

from showcase.application.arithmetic import (
    add,
    double_all,
    factorial,
    keep_even,
    subtract,
    sum_numbers,
    total,
)
from showcase.application.asynchrony import delay, fetch_all, fetch_data, get_data
from showcase.application.closures import create_counter, higher_order
from showcase.application.messages import describe, temperature_message
from showcase.application.ports import Fetcher, Response
from showcase.application.unpacking import (
    clone_person,
    clone_record,
    extend,
    extract_name_and_city,
    split_head,
)

__all__ = [
    "Fetcher",
    "Response",
    "add",
    "clone_person",
    "clone_record",
    "create_counter",
    "delay",
    "describe",
    "double_all",
    "extend",
    "extract_name_and_city",
    "factorial",
    "fetch_all",
    "fetch_data",
    "get_data",
    "higher_order",
    "keep_even",
    "split_head",
    "subtract",
    "sum_numbers",
    "temperature_message",
    "total",
]
