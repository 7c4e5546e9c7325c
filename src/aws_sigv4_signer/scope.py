from dataclasses import dataclass


@dataclass(frozen=True)
class CredentialScope:
    """Date, region and service a signature is valid for."""

    TERMINATION_STRING = "aws4_request"

    date_without_timestamp: str
    service: str
    region: str

    def get(self) -> str:
        return (
            f"{self.date_without_timestamp}/{self.region}/"
            f"{self.service}/{self.TERMINATION_STRING}"
        )
