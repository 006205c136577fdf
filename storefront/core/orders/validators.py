"""
Validators for checkout input.
"""

import re
from typing import Optional, Tuple

from storefront.core.errors import InvalidAddress, InvalidPhone


class PhoneValidator:
    """Validate phone numbers: digits with optional leading '+'."""

    PHONE_PATTERN = re.compile(r'^\+?[0-9]{10,15}$')

    @classmethod
    def validate(cls, phone: str) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate phone number.

        Returns:
            Tuple of (is_valid, phone, error_message)
        """
        phone = (phone or "").strip()

        if not cls.PHONE_PATTERN.match(phone):
            return False, None, InvalidPhone.message

        return True, phone, None


class AddressValidator:
    """Validate shipping address."""

    MIN_LENGTH = 5

    @classmethod
    def validate(cls, address: str) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate shipping address.

        Returns:
            Tuple of (is_valid, address, error_message)
        """
        address = (address or "").strip()

        if len(address) < cls.MIN_LENGTH:
            return False, None, InvalidAddress.message

        return True, address, None
