"""Example: asserting on application log output with message matchers.

Run with:
    python examples/log_assertions.py

Captures records from a logger as Message objects, then checks them in
both assertion styles.
"""

import logging

from assertpy import assert_that as assert_fluent
from hamcrest import assert_that, contains_string, has_item, is_not

from messagematch import Severity, has_severity
from messagematch.adapters.assertpy import register
from messagematch.adapters.hamcrest import message_with_severity, message_with_text
from messagematch.adapters.logging import captured_messages

logger = logging.getLogger("examples.checkout")


def checkout(order_id: str, in_stock: bool) -> None:
    """Pretend to process an order, logging as it goes."""
    logger.info("Processing order %s", order_id)
    if not in_stock:
        logger.error("Order %s failed: item out of stock", order_id)


if __name__ == "__main__":
    register()

    with captured_messages(logger) as messages:
        checkout("A-1", in_stock=True)
        checkout("A-2", in_stock=False)

    for message in messages:
        print(message)

    assert_that(messages, has_item(message_with_text(contains_string("A-2 failed"))))
    assert_that(messages, is_not(has_item(message_with_severity(Severity.WARN))))
    assert_fluent(messages).contains_message_matching(has_severity(Severity.ERROR))
    print("All assertions passed.")
