from enum import StrEnum


class PaymentMethod(StrEnum):
    PAYPAL = "paypal"
    CREDIT_CARD = "credit_card"
    CRYPTO = "crypto"
