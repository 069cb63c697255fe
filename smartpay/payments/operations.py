"""SmartPay operation schemas.

API docs: https://www.kiwifast.com/doc/
"""

from smartpay.payments.schemas import FieldSpec, Operation

CREATE_MINIAPP_PAY = Operation(
    name="create_miniapp_pay",
    service="create_miniapp_pay",
    fields=(
        FieldSpec("merchant_id", True, "Merchant ID"),
        FieldSpec("increment_id", True, "Merchant order number"),
        FieldSpec("sub_appid", True, "Mini-app APPID"),
        FieldSpec("sub_openid", True, "Payer openid within the mini-app"),
        FieldSpec("grandtotal", True, "Order amount"),
        FieldSpec("currency", True, "Currency code"),
        FieldSpec("valid_mins", False, "Minutes until the order expires"),
        FieldSpec("payment_channels", True, "Payment channels"),
        FieldSpec("notify_url", True, "Notification URL"),
        FieldSpec("subject", False, "Transaction title"),
        FieldSpec("describe", True, "Transaction description"),
        FieldSpec("nonce_str", True, "Random string"),
        FieldSpec("service", True, "Requested service"),
    ),
)

# Hosted payment page: the payer is redirected to SmartPay and returned to return_url
CREATE_REDIRECT_PAY = Operation(
    name="create_redirect_pay",
    service="create_redirect_pay",
    fields=(
        FieldSpec("merchant_id", True, "Merchant ID"),
        FieldSpec("increment_id", True, "Merchant order number"),
        FieldSpec("grandtotal", True, "Order amount"),
        FieldSpec("currency", True, "Currency code"),
        FieldSpec("valid_mins", False, "Minutes until the order expires"),
        FieldSpec("payment_channels", True, "Payment channels"),
        FieldSpec("notify_url", True, "Notification URL"),
        FieldSpec("return_url", True, "URL the payer returns to"),
        FieldSpec("subject", False, "Transaction title"),
        FieldSpec("describe", True, "Transaction description"),
        FieldSpec("nonce_str", True, "Random string"),
        FieldSpec("service", True, "Requested service"),
    ),
)

OPERATIONS: dict[str, Operation] = {
    op.name: op for op in (CREATE_MINIAPP_PAY, CREATE_REDIRECT_PAY)
}
