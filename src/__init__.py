"""Terminal checkout demo.

Business logic lives in :mod:`app`, the catalogue and cart in
:mod:`catalog` and :mod:`cart`, stubbed payments in
:mod:`payment_service` and the order record in :mod:`order_log`.
"""
