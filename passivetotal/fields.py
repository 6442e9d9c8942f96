"""Search fields accepted by the SSL certificate and WHOIS field searches.

Each member's value is the exact wire string the API expects. Parsing from
user input is case-insensitive; encoding always yields the canonical casing.
"""

from enum import Enum

from passivetotal.errors import FieldParseError


class SearchField(Enum):
    """Base for search field enums: wire-string values, case-insensitive parse."""

    def encode(self) -> str:
        """Return the wire string for this field."""
        return self.value

    @classmethod
    def parse(cls, value: "str | SearchField") -> "SearchField":
        """Parse a field name case-insensitively.

        Args:
            value: Field name such as "subjectOrganizationName" or "SHA1",
                or an existing member (returned unchanged).

        Returns:
            The matching enum member.

        Raises:
            FieldParseError: If the string names no member of this enum.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls._lookup().get(value.lower())
            if member is not None:
                return member
        raise FieldParseError(cls.__name__, str(value))

    @classmethod
    def _lookup(cls) -> dict[str, "SearchField"]:
        return {member.value.lower(): member for member in cls}

    def __str__(self) -> str:
        return self.value


class SslField(SearchField):
    """SSL certificate attributes available to field searches."""

    ISSUER_SURNAME = "issuerSurname"
    SUBJECT_ORGANIZATION_NAME = "subjectOrganizationName"
    ISSUER_COUNTRY = "issuerCountry"
    ISSUER_ORGANIZATION_UNIT_NAME = "issuerOrganizationUnitName"
    FINGERPRINT = "fingerprint"
    SUBJECT_ORGANIZATION_UNIT_NAME = "subjectOrganizationUnitName"
    SERIAL_NUMBER = "serialNumber"
    SUBJECT_EMAIL_ADDRESS = "subjectEmailAddress"
    SUBJECT_COUNTRY = "subjectCountry"
    ISSUER_GIVEN_NAME = "issuerGivenName"
    SUBJECT_COMMON_NAME = "subjectCommonName"
    ISSUER_COMMON_NAME = "issuerCommonName"
    ISSUER_STATE_OR_PROVINCE_NAME = "issuerStateOrProvinceName"
    ISSUER_PROVINCE = "issuerProvince"
    SUBJECT_STATE_OR_PROVINCE_NAME = "subjectStateOrProvinceName"
    SHA1 = "sha1"
    SUBJECT_STREET_ADDRESS = "subjectStreetAddress"
    SUBJECT_SERIAL_NUMBER = "subjectSerialNumber"
    ISSUER_ORGANIZATION_NAME = "issuerOrganizationName"
    SUBJECT_SURNAME = "subjectSurname"
    SUBJECT_LOCALITY_NAME = "subjectLocalityName"
    ISSUER_STREET_ADDRESS = "issuerStreetAddress"
    ISSUER_LOCALITY_NAME = "issuerLocalityName"
    SUBJECT_GIVEN_NAME = "subjectGivenName"
    SUBJECT_PROVINCE = "subjectProvince"
    ISSUER_SERIAL_NUMBER = "issuerSerialNumber"
    ISSUER_EMAIL_ADDRESS = "issuerEmailAddress"


class WhoisField(SearchField):
    """WHOIS record attributes available to field searches."""

    EMAIL = "email"
    DOMAIN = "domain"
    NAME = "name"
    ORGANIZATION = "organization"
    ADDRESS = "address"
    PHONE = "phone"
    NAMESERVER = "nameserver"
