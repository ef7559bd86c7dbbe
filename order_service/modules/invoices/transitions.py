"""Invoice state machine.

    pay   ISSUED -> PAID
    void  ISSUED -> VOID
"""

from order_service.core.domain_types import InvoiceOperation, InvoiceStatus
from order_service.core.lifecycle import TransitionTable, rule

INVOICE_TRANSITIONS: TransitionTable[InvoiceStatus, InvoiceOperation] = TransitionTable(
    "Invoice",
    InvoiceStatus.ISSUED,
    [
        rule(InvoiceOperation.PAY, [InvoiceStatus.ISSUED], InvoiceStatus.PAID),
        rule(InvoiceOperation.VOID, [InvoiceStatus.ISSUED], InvoiceStatus.VOID),
    ],
)
