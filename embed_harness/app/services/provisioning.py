from typing import Dict

from loguru import logger

from embed_harness.app.parsing.connection_uri import classify, extract_credentials
from embed_harness.app.services.basedash import BasedashClient

DEFAULT_DATA_SOURCE_NAME = "Connected Database"
UNSUPPORTED_DIALECT = (
    "Could not determine database type from URI. "
    "Supported: PostgreSQL, MySQL, ClickHouse, SQL Server"
)


class SetupError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def setup_org_and_data_source(
    api_key: str, org_name: str, data_source_uri: str, data_source_name: str = ""
) -> Dict[str, str]:
    """
    Validate: required fields, dialect, credentials, host.
    Provision: create the organization, then a direct data source in it.
    Nothing is sent to Basedash unless the URI passes validation.
    """
    if not api_key or not org_name or not data_source_uri:
        raise SetupError("Missing required fields")

    dialect = classify(data_source_uri)
    if dialect is None:
        raise SetupError(UNSUPPORTED_DIALECT)

    creds = extract_credentials(data_source_uri)
    if creds is None:
        raise SetupError("Could not parse connection URI")
    if not creds.host:
        raise SetupError("Host is required in connection URI")

    client = BasedashClient(api_key)

    # jwtSecret is generated server-side
    logger.info(f"Creating organization: {org_name}")
    org = client.create_organization(org_name)
    logger.info(f"Organization created: {org['id']}")

    display_name = data_source_name or DEFAULT_DATA_SOURCE_NAME
    logger.info(f"Creating data source: {display_name} ({dialect.value})")
    ds = client.create_data_source(org["id"], display_name, dialect, creds)
    logger.info(f"Data source created: {ds['id']}")

    return {
        "orgId": org["id"],
        "orgSlug": org["slug"],
        "jwtSecret": org["jwtSecret"],
        "dataSourceId": ds["id"],
        "dataSourceName": ds["displayName"],
    }
