"""
The catalogue: every definition record one build compiles.

A ``Catalogue`` is a plain frozen container of record tuples plus the
archive's header metadata.  ``builtin_catalogue()`` returns the core
content pack that ships with the package; operators can replace it with
a YAML file (see ``omarchive.definitions.loader``).

Examples:
    >>> catalogue = builtin_catalogue()
    >>> catalogue.archive.name
    'CoreContentPack'
    >>> catalogue.deployed_type("PostgreSQL Server").associated_type_name
    'SoftwareServer'

Tags:
    definitions, catalogue, content-pack, omarchive
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import with_config

from omarchive.core.errors import CatalogueError
from omarchive.definitions.records import (
    RECORD_CONFIG,
    ActionTargetRecord,
    AttributeNameRecord,
    ClassificationRecord,
    ConnectorCategoryRecord,
    ConnectorDirectoryRecord,
    ConnectorTypeRecord,
    DeployedImplementationTypeRecord,
    EnumValueRecord,
    FileExtensionRecord,
    FileNameRecord,
    FileTypeRecord,
    GovernanceEngineRecord,
    GovernanceProcessRecord,
    GovernanceServiceRecord,
    IntegrationConnectorRecord,
    IntegrationGroupRecord,
    OpenMetadataEnumRecord,
    OpenMetadataTypeRecord,
    PlaceholderRecord,
    ProcessStepRecord,
    ProcessTransitionRecord,
    RequestTypeRecord,
    SoftwareServiceRecord,
    SupportedTechnologyRecord,
    TemplateKind,
    TemplateRecord,
    ValidValueSetRecord,
    placeholder,
)


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ArchiveMetadataRecord:
    """Header fields of the archive a catalogue compiles into.

    ``root_name`` names the identifier registry files
    (``<root_name>GUIDMap.json``).
    """

    guid: str
    name: str
    description: str
    originator_name: str
    originator_license: str = "Apache-2.0"
    version_name: str = "1.0"
    depends_on: tuple[str, ...] = ()
    root_name: str | None = None

    @property
    def registry_root_name(self) -> str:
        return self.root_name or self.name


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class Catalogue:
    """All definition records for one archive, grouped by category."""

    archive: ArchiveMetadataRecord
    open_metadata_types: tuple[OpenMetadataTypeRecord, ...] = ()
    enums: tuple[OpenMetadataEnumRecord, ...] = ()
    attribute_names: tuple[AttributeNameRecord, ...] = ()
    valid_value_sets: tuple[ValidValueSetRecord, ...] = ()
    deployed_implementation_types: tuple[DeployedImplementationTypeRecord, ...] = ()
    software_services: tuple[SoftwareServiceRecord, ...] = ()
    file_types: tuple[FileTypeRecord, ...] = ()
    file_names: tuple[FileNameRecord, ...] = ()
    file_extensions: tuple[FileExtensionRecord, ...] = ()
    connector_directory: ConnectorDirectoryRecord | None = None
    connector_categories: tuple[ConnectorCategoryRecord, ...] = ()
    connector_types: tuple[ConnectorTypeRecord, ...] = ()
    templates: tuple[TemplateRecord, ...] = ()
    integration_group: IntegrationGroupRecord | None = None
    integration_connectors: tuple[IntegrationConnectorRecord, ...] = ()
    governance_engines: tuple[GovernanceEngineRecord, ...] = ()
    governance_services: tuple[GovernanceServiceRecord, ...] = ()
    request_types: tuple[RequestTypeRecord, ...] = ()
    governance_processes: tuple[GovernanceProcessRecord, ...] = ()

    def deployed_type(self, name: str) -> DeployedImplementationTypeRecord:
        """Deployed implementation type (or software service) called ``name``.

        Raises:
            CatalogueError: No record has that name
        """
        for record in self.deployed_implementation_types:
            if record.name == name:
                return record
        for service in self.software_services:
            if service.name == name:
                return service.as_deployed_type()
        raise CatalogueError(f"Unknown deployed implementation type '{name}'")

    def summary(self) -> dict[str, int]:
        """Record counts per category (for logs and the CLI)."""
        return {
            "open_metadata_types": len(self.open_metadata_types),
            "enums": len(self.enums),
            "attribute_names": len(self.attribute_names),
            "deployed_implementation_types": len(self.deployed_implementation_types),
            "software_services": len(self.software_services),
            "file_types": len(self.file_types),
            "connector_types": len(self.connector_types),
            "templates": len(self.templates),
            "integration_connectors": len(self.integration_connectors),
            "governance_engines": len(self.governance_engines),
            "governance_services": len(self.governance_services),
            "request_types": len(self.request_types),
            "governance_processes": len(self.governance_processes),
        }


# =============================================================================
# Built-in core content pack
# =============================================================================

CORE_CONTENT_PACK = ArchiveMetadataRecord(
    guid="09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
    name="CoreContentPack",
    description=(
        "Connector Types and Categories for connectors from the Egeria project along with "
        "metadata valid values for the types of technology supported by these connectors."
    ),
    originator_name="Egeria Project",
    depends_on=("OpenMetadataTypes",),
)

_TYPES_WIKI = "https://egeria-project.org/types/"

# ── Deployed implementation types ────────────────────────────────

FILE_FOLDER = DeployedImplementationTypeRecord(
    "File Folder", "FileFolder", "A directory (folder) in a file system.",
    wiki_url=_TYPES_WIKI + "2/0220-Files-and-Folders/",
)
DATA_FILE = DeployedImplementationTypeRecord(
    "File", "DataFile", "A data file stored in a file system.",
    wiki_url=_TYPES_WIKI + "2/0220-Files-and-Folders/",
)
CSV_FILE = DeployedImplementationTypeRecord(
    "CSV Data File", "CSVFile", "A text file of comma-separated values.",
)
JSON_FILE = DeployedImplementationTypeRecord(
    "JSON Data File", "DataFile", "A text file of JavaScript Object Notation (JSON) documents.",
)
POSTGRES_SERVER = DeployedImplementationTypeRecord(
    "PostgreSQL Server", "SoftwareServer", "A database server running the PostgreSQL software.",
    wiki_url="https://egeria-project.org/connectors/postgres-server/",
)
POSTGRES_DBMS = DeployedImplementationTypeRecord(
    "PostgreSQL Relational Database Manager", "DatabaseManager",
    "The database manager capability of a PostgreSQL server.",
)
POSTGRES_DATABASE = DeployedImplementationTypeRecord(
    "PostgreSQL Relational Database", "Database", "A relational database hosted on a PostgreSQL server.",
)
JDBC_DATABASE = DeployedImplementationTypeRecord(
    "JDBC Relational Database", "Database", "A relational database accessed through a JDBC driver.",
)
KAFKA_SERVER = DeployedImplementationTypeRecord(
    "Apache Kafka Server", "SoftwareServer", "A software server running an Apache Kafka event broker.",
)
KAFKA_BROKER = DeployedImplementationTypeRecord(
    "Apache Kafka Event Broker", "EventBroker", "The event broker capability of an Apache Kafka server.",
)
KAFKA_TOPIC = DeployedImplementationTypeRecord(
    "Apache Kafka Topic", "KafkaTopic", "An event topic hosted by an Apache Kafka event broker.",
)
REST_ENDPOINT = DeployedImplementationTypeRecord(
    "REST API Endpoint", "Endpoint", "The network address of a REST API.",
)
METADATA_ACCESS_SERVER = DeployedImplementationTypeRecord(
    "Metadata Access Server", "MetadataServer", "An OMAG server that hosts the open metadata access services.",
)
VIEW_SERVER = DeployedImplementationTypeRecord(
    "View Server", "SoftwareServer", "An OMAG server that hosts the open metadata view services.",
)
ENGINE_HOST = DeployedImplementationTypeRecord(
    "Engine Host", "SoftwareServer", "An OMAG server that runs governance engines.",
)
INTEGRATION_DAEMON = DeployedImplementationTypeRecord(
    "Integration Daemon", "SoftwareServer", "An OMAG server that runs integration connectors.",
)
GOVERNANCE_ACTION_ENGINE = DeployedImplementationTypeRecord(
    "Governance Action Engine", "GovernanceActionEngine", "A collection of governance action services.",
)
GOVERNANCE_ACTION_SERVICE = DeployedImplementationTypeRecord(
    "Governance Action Service", "GovernanceActionService", "A connector that performs a governance action.",
)
SURVEY_ACTION_ENGINE = DeployedImplementationTypeRecord(
    "Survey Action Engine", "SurveyActionEngine", "A collection of survey action services.",
)
INTEGRATION_CONNECTOR = DeployedImplementationTypeRecord(
    "Integration Connector", "IntegrationConnector", "A connector that synchronizes metadata with a third party.",
)

DEPLOYED_IMPLEMENTATION_TYPES = (
    FILE_FOLDER,
    DATA_FILE,
    CSV_FILE,
    JSON_FILE,
    POSTGRES_SERVER,
    POSTGRES_DBMS,
    POSTGRES_DATABASE,
    JDBC_DATABASE,
    KAFKA_SERVER,
    KAFKA_BROKER,
    KAFKA_TOPIC,
    REST_ENDPOINT,
    METADATA_ACCESS_SERVER,
    VIEW_SERVER,
    ENGINE_HOST,
    INTEGRATION_DAEMON,
    GOVERNANCE_ACTION_ENGINE,
    GOVERNANCE_ACTION_SERVICE,
    SURVEY_ACTION_ENGINE,
    INTEGRATION_CONNECTOR,
)

SOFTWARE_SERVICES = (
    SoftwareServiceRecord(
        "Asset Manager OMAS",
        "Exchanges metadata with third party asset managers.",
        hosted_by=(METADATA_ACCESS_SERVER.name,),
    ),
    SoftwareServiceRecord(
        "Governance Engine OMAS",
        "Supplies governance engine definitions and records governance actions.",
        hosted_by=(METADATA_ACCESS_SERVER.name,),
    ),
    SoftwareServiceRecord(
        "Asset Catalog OMVS",
        "Search for assets for user interfaces.",
        hosted_by=(VIEW_SERVER.name,),
        partner_service="Asset Manager OMAS",
    ),
    SoftwareServiceRecord(
        "Governance Action OMES",
        "Runs governance action engines.",
        hosted_by=(ENGINE_HOST.name,),
        partner_service="Governance Engine OMAS",
    ),
    SoftwareServiceRecord(
        "Database Integrator OMIS",
        "Runs integration connectors that catalog relational databases.",
        hosted_by=(INTEGRATION_DAEMON.name,),
        partner_service="Asset Manager OMAS",
    ),
    SoftwareServiceRecord(
        "Topic Integrator OMIS",
        "Runs integration connectors that catalog event topics.",
        hosted_by=(INTEGRATION_DAEMON.name,),
        partner_service="Asset Manager OMAS",
    ),
)

# ── Open metadata types and enums ────────────────────────────────

OPEN_METADATA_TYPES = (
    OpenMetadataTypeRecord("Asset", "The description of a resource of value.", _TYPES_WIKI + "0/0010-Base-Model/"),
    OpenMetadataTypeRecord("DataFile", "A file containing stored data.", _TYPES_WIKI + "2/0220-Files-and-Folders/"),
    OpenMetadataTypeRecord("CSVFile", "A file of comma-separated values.", _TYPES_WIKI + "2/0220-Files-and-Folders/"),
    OpenMetadataTypeRecord("FileFolder", "A directory in a file system.", _TYPES_WIKI + "2/0220-Files-and-Folders/"),
    OpenMetadataTypeRecord("SoftwareServer", "A running software server.", _TYPES_WIKI + "0/0040-Software-Servers/"),
    OpenMetadataTypeRecord("SoftwareCapability", "A capability hosted by a software server."),
    OpenMetadataTypeRecord("DatabaseManager", "A capability that manages relational databases."),
    OpenMetadataTypeRecord("Database", "A collection of related data organized for access."),
    OpenMetadataTypeRecord("EventBroker", "A capability that routes events between topics."),
    OpenMetadataTypeRecord("KafkaTopic", "An event topic supported by Apache Kafka."),
    OpenMetadataTypeRecord("Endpoint", "The network address of a service or server."),
    OpenMetadataTypeRecord("Connection", "The information needed to create a connector."),
    OpenMetadataTypeRecord("IntegrationConnector", "A connector that runs in an integration daemon."),
    OpenMetadataTypeRecord("GovernanceActionEngine", "A governance engine of governance action services."),
    OpenMetadataTypeRecord("GovernanceActionService", "A governance service that performs a governance action."),
)

RESOURCE_USE = OpenMetadataEnumRecord(
    consuming_type_name="ResourceList",
    property_name="resourceUse",
    enum_type_name="ResourceUse",
    values=(
        EnumValueRecord("Hosted Service", "A service hosted by the software server."),
        EnumValueRecord("Called Service", "A service called by this service."),
        EnumValueRecord("Catalog Resource", "Catalog the contents of the linked resource."),
        EnumValueRecord("Improve Metadata", "Improve the metadata of the linked resource."),
        EnumValueRecord("Survey Resource", "Survey the linked resource."),
        EnumValueRecord("Hosted Governance Engine", "A governance engine hosted by the server."),
        EnumValueRecord("Hosted Connector", "A connector hosted by the server."),
    ),
)

CONFIDENTIALITY_LEVEL = OpenMetadataEnumRecord(
    consuming_type_name="Confidentiality",
    property_name="levelIdentifier",
    enum_type_name="ConfidentialityLevel",
    use_ordinal=True,
    values=(
        EnumValueRecord("Unclassified", "The data is public.", ordinal=0),
        EnumValueRecord("Internal", "The data is for internal use only.", ordinal=1),
        EnumValueRecord("Confidential", "The data is confidential.", ordinal=2),
        EnumValueRecord("Sensitive", "The data is sensitive and inappropriate use may harm.", ordinal=3),
        EnumValueRecord("Restricted", "The data is very valuable and access must be restricted.", ordinal=4),
    ),
)

BYTE_ORDERING = OpenMetadataEnumRecord(
    consuming_type_name="OperatingPlatform",
    property_name="byteOrdering",
    enum_type_name="ByteOrdering",
    values=(
        EnumValueRecord("Little-Endian", "Least significant byte first."),
        EnumValueRecord("Big-Endian", "Most significant byte first."),
    ),
)

PROJECT_HEALTH = OpenMetadataEnumRecord(
    consuming_type_name="Project",
    property_name="projectHealth",
    values=(
        EnumValueRecord("Green", "The project is on track.", additional_properties={"colour": "#00FF00"}),
        EnumValueRecord("Amber", "The project is at risk.", additional_properties={"colour": "#FFBF00"}),
        EnumValueRecord("Red", "The project is failing.", additional_properties={"colour": "#FF0000"}),
    ),
)

ATTRIBUTE_NAMES = (
    AttributeNameRecord("supportedTemplate", "A template that the element can use."),
    AttributeNameRecord("supportedRequestParameter", "A request parameter that the service understands."),
    AttributeNameRecord("supportedActionTarget", "An action target that the service can work on."),
    AttributeNameRecord("producedRequestParameter", "A request parameter passed on to the next step."),
    AttributeNameRecord("producedActionTarget", "An action target passed on to the next step."),
    AttributeNameRecord("producedGuard", "A guard the service returns when it completes."),
    AttributeNameRecord("placeholderProperty", "A placeholder that is replaced when a template is used."),
    AttributeNameRecord("replacementAttribute", "An attribute to supply when a template is used."),
)

VALID_VALUE_SETS = (
    ValidValueSetRecord("ResourceList", "resourceUseProperties", "frequency"),
    ValidValueSetRecord("ResourceList", "resourceUseProperties", "interestingTypeName"),
)

# ── File reference data ──────────────────────────────────────────

FILE_TYPES = (
    FileTypeRecord(
        "CSV Data File", "A text file of comma-separated values.",
        encoding="UTF-8", asset_sub_type_name="CSVFile", deployed_implementation_type=CSV_FILE.name,
    ),
    FileTypeRecord(
        "JSON Data File", "A text file of JSON documents.",
        encoding="UTF-8", asset_sub_type_name="DataFile", deployed_implementation_type=JSON_FILE.name,
    ),
    FileTypeRecord("Markdown Document", "A text document formatted with Markdown.", encoding="UTF-8"),
    FileTypeRecord("Properties File", "A text file of name=value pairs.", encoding="ISO-8859-1"),
)

FILE_NAMES = (
    FileNameRecord("README.md", file_type="Markdown Document", deployed_implementation_type=DATA_FILE.name),
    FileNameRecord("application.properties", file_type="Properties File"),
)

FILE_EXTENSIONS = (
    FileExtensionRecord("csv", ("CSV Data File",)),
    FileExtensionRecord("json", ("JSON Data File",)),
    FileExtensionRecord("md", ("Markdown Document",)),
    FileExtensionRecord("properties", ("Properties File",)),
)

# ── Connectors ───────────────────────────────────────────────────

CONNECTOR_DIRECTORY = ConnectorDirectoryRecord(
    "OpenMetadataConnectorTypeDirectory_09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
    "Open Metadata Connector Type Directory",
    "Open Metadata standard connector categories and connector types.",
)

FILE_CONNECTOR_CATEGORY = ConnectorCategoryRecord(
    "OpenMetadataFileConnectorCategory_09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
    "Open Metadata File Connector Category",
    "Open Metadata connector category for connectors that work with files.",
)
KAFKA_CONNECTOR_CATEGORY = ConnectorCategoryRecord(
    "OpenMetadataKafkaConnectorCategory_09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
    "Open Metadata Apache Kafka Connector Category",
    "Open Metadata connector category for connectors to Apache Kafka.",
    target_technology_source="Apache Software Foundation (ASF)",
    target_technology_name="Apache Kafka",
)
JDBC_CONNECTOR_CATEGORY = ConnectorCategoryRecord(
    "OpenMetadataJDBCConnectorCategory_09450b83-20ff-4a8b-a8fb-f9b527bbcba6",
    "Open Metadata JDBC Connector Category",
    "Open Metadata connector category for connectors to relational databases.",
    target_technology_source="Java Database Connector (JDBC)",
    target_technology_name="Relational Database",
)

CSV_FILE_CONNECTOR = ConnectorTypeRecord(
    guid="a9dfb04e-967c-4b61-90d0-b8796c7b787c",
    qualified_name="Egeria:ConnectorType:CSVFileStoreConnector",
    display_name="CSV File Store Connector",
    description="Reads records from a comma-separated values file.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.datastore.csvfile.CSVFileStoreProvider",
    category=FILE_CONNECTOR_CATEGORY.qualified_name,
    supported_asset_type_name="CSVFile",
    supported_deployed_types=(CSV_FILE.name,),
    recognized_configuration_properties=("delimiterCharacter", "quoteCharacter", "columnNames"),
)
BASIC_FILE_CONNECTOR = ConnectorTypeRecord(
    guid="ac75b528-582e-4cd7-9fd3-d9a2a8ad11f7",
    qualified_name="Egeria:ConnectorType:BasicFileStoreConnector",
    display_name="Basic File Store Connector",
    description="Reads the raw content of a file.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.datastore.basicfile.BasicFileStoreProvider",
    category=FILE_CONNECTOR_CATEGORY.qualified_name,
    supported_asset_type_name="DataFile",
    supported_deployed_types=(DATA_FILE.name, JSON_FILE.name),
)
BASIC_FOLDER_CONNECTOR = ConnectorTypeRecord(
    guid="fd9867aa-738f-4f42-ace2-17f7e4d6038d",
    qualified_name="Egeria:ConnectorType:BasicFolderConnector",
    display_name="Basic Folder Connector",
    description="Lists and reads the files in a folder.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.datastore.basicfile.BasicFolderProvider",
    category=FILE_CONNECTOR_CATEGORY.qualified_name,
    supported_asset_type_name="FileFolder",
    supported_deployed_types=(FILE_FOLDER.name,),
)
JDBC_RESOURCE_CONNECTOR = ConnectorTypeRecord(
    guid="9c85c692-b0a5-4306-bd19-13dfd6936481",
    qualified_name="Egeria:ConnectorType:JDBCResourceConnector",
    display_name="JDBC Resource Connector",
    description="Connects to a relational database through its JDBC driver.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.resource.jdbc.JDBCResourceConnectorProvider",
    category=JDBC_CONNECTOR_CATEGORY.qualified_name,
    supported_asset_type_name="Database",
    supported_deployed_types=(JDBC_DATABASE.name, POSTGRES_DATABASE.name, POSTGRES_SERVER.name),
    recognized_configuration_properties=("jdbcDriverManagerClassName", "jdbcConnectionTimeout", "jdbcDatabaseName"),
)
KAFKA_ADMIN_CONNECTOR = ConnectorTypeRecord(
    guid="8d7d9acc-8024-42df-b725-44919db45a08",
    qualified_name="Egeria:ConnectorType:ApacheKafkaAdminConnector",
    display_name="Apache Kafka Admin Connector",
    description="Retrieves the topics defined on an Apache Kafka server.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.apachekafka.resource.ApacheKafkaAdminProvider",
    category=KAFKA_CONNECTOR_CATEGORY.qualified_name,
    supported_asset_type_name="SoftwareServer",
    supported_deployed_types=(KAFKA_SERVER.name,),
)
FILES_MONITOR_CONNECTOR = ConnectorTypeRecord(
    guid="7fb2eade-7737-478c-8650-ddc13d50ec78",
    qualified_name="Egeria:IntegrationConnector:Files:DataFilesMonitor",
    display_name="Data Files Monitor Integration Connector",
    description="Maintains a DataFile asset for each file in a directory tree.",
    connector_provider_class_name=(
        "org.odpi.openmetadata.adapters.connectors.integration.basicfiles.DataFilesMonitorIntegrationProvider"
    ),
    supported_deployed_types=(FILE_FOLDER.name,),
    recognized_configuration_properties=("templateQualifiedName", "allowCatalogDelete", "waitForDirectory"),
)
JDBC_INTEGRATION_CONNECTOR = ConnectorTypeRecord(
    guid="f298e873-0068-4495-b013-79c740a3e577",
    qualified_name="Egeria:IntegrationConnector:Database:JDBC",
    display_name="JDBC Integration Connector",
    description="Catalogs the schemas, tables and columns of a relational database.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.integration.jdbc.JDBCIntegrationConnectorProvider",
    category=JDBC_CONNECTOR_CATEGORY.qualified_name,
    supported_deployed_types=(JDBC_DATABASE.name, POSTGRES_DATABASE.name),
    recognized_configuration_properties=("includeSchemaNames", "excludeSchemaNames"),
)
POSTGRES_SERVER_INTEGRATION_CONNECTOR = ConnectorTypeRecord(
    guid="bfb593f9-72dc-4cc8-9a2d-5e561e3ac604",
    qualified_name="Egeria:IntegrationConnector:Database:PostgreSQLServer",
    display_name="PostgreSQL Server Integration Connector",
    description="Catalogs the databases hosted by a PostgreSQL server.",
    connector_provider_class_name=(
        "org.odpi.openmetadata.adapters.connectors.postgres.catalog.PostgresServerIntegrationProvider"
    ),
    category=JDBC_CONNECTOR_CATEGORY.qualified_name,
    supported_deployed_types=(POSTGRES_SERVER.name,),
    recognized_configuration_properties=("includeDatabaseNames", "excludeDatabaseNames"),
)
KAFKA_TOPIC_INTEGRATION_CONNECTOR = ConnectorTypeRecord(
    guid="6324664c-b91a-45d4-91b7-3d8fe0b14ca5",
    qualified_name="Egeria:IntegrationConnector:Topic:Kafka",
    display_name="Kafka Topic Integration Connector",
    description="Catalogs the topics of an Apache Kafka server.",
    connector_provider_class_name=(
        "org.odpi.openmetadata.adapters.connectors.integration.kafka.KafkaTopicIntegrationProvider"
    ),
    category=KAFKA_CONNECTOR_CATEGORY.qualified_name,
    supported_deployed_types=(KAFKA_SERVER.name,),
)
OPENAPI_INTEGRATION_CONNECTOR = ConnectorTypeRecord(
    guid="868cc692-c70a-4cbd-97bc-72f77ed9da36",
    qualified_name="Egeria:IntegrationConnector:API:OpenAPI",
    display_name="OpenAPI Monitor Integration Connector",
    description="Catalogs the operations published in an OpenAPI document.",
    connector_provider_class_name=(
        "org.odpi.openmetadata.adapters.connectors.integration.openapis.OpenAPIMonitorIntegrationProvider"
    ),
    supported_deployed_types=(REST_ENDPOINT.name,),
)

CONNECTOR_TYPES = (
    CSV_FILE_CONNECTOR,
    BASIC_FILE_CONNECTOR,
    BASIC_FOLDER_CONNECTOR,
    JDBC_RESOURCE_CONNECTOR,
    KAFKA_ADMIN_CONNECTOR,
    FILES_MONITOR_CONNECTOR,
    JDBC_INTEGRATION_CONNECTOR,
    POSTGRES_SERVER_INTEGRATION_CONNECTOR,
    KAFKA_TOPIC_INTEGRATION_CONNECTOR,
    OPENAPI_INTEGRATION_CONNECTOR,
)

# ── Templates ────────────────────────────────────────────────────

_SERVER_NAME = PlaceholderRecord("serverName", "Name of the server.", example="myserver")
_HOST_IDENTIFIER = PlaceholderRecord("hostIdentifier", "Network host name or IP address.", example="localhost")
_PORT_NUMBER = PlaceholderRecord("portNumber", "Port the server listens on.", example="5432")
_DESCRIPTION = PlaceholderRecord("description", "Description of the element.", required=False)
_VERSION = PlaceholderRecord("versionIdentifier", "Version of the element.", required=False)
_PATH_NAME = PlaceholderRecord("pathName", "Full path of the file or folder.", example="/data/files/sample.csv")
_FILE_ENCODING = PlaceholderRecord("fileEncoding", "Character encoding of the file.", example="UTF-8", required=False)

POSTGRES_SERVER_TEMPLATE = TemplateRecord(
    kind=TemplateKind.SOFTWARE_SERVER,
    deployed_implementation_type=POSTGRES_SERVER.name,
    resource_name=placeholder("serverName"),
    template_name="PostgreSQL Server Template",
    guid="542134e6-b9ce-4dce-8aef-22e8daf34fdb",
    template_description="Create a PostgreSQL Server SoftwareServer asset with its DBMS capability, endpoint and connection.",
    description=placeholder("description"),
    network_address="jdbc:postgresql://~{hostIdentifier}~:~{portNumber}~/postgres",
    protocol="JDBC",
    connector_type=JDBC_RESOURCE_CONNECTOR.qualified_name,
    user_id=placeholder("databaseUserId"),
    configuration_properties={"jdbcDatabaseName": "postgres"},
    capability_type=POSTGRES_DBMS.name,
    capability_name="DBMS",
    placeholders=(
        _SERVER_NAME,
        _HOST_IDENTIFIER,
        _PORT_NUMBER,
        PlaceholderRecord("databaseUserId", "User identifier for the database connection."),
        PlaceholderRecord("databasePassword", "Password for the database user."),
        _DESCRIPTION,
        _VERSION,
    ),
    replacement_attributes=("description", "versionIdentifier"),
)
POSTGRES_DATABASE_TEMPLATE = TemplateRecord(
    kind=TemplateKind.ASSET,
    deployed_implementation_type=POSTGRES_DATABASE.name,
    resource_name="~{serverName}~:~{databaseName}~",
    template_name="PostgreSQL Relational Database Template",
    guid="d9807b21-c42c-4213-a35a-953ff38aaf5f",
    template_description="Create a PostgreSQL database asset with its endpoint and connection.",
    network_address="jdbc:postgresql://~{hostIdentifier}~:~{portNumber}~/~{databaseName}~",
    protocol="JDBC",
    connector_type=JDBC_RESOURCE_CONNECTOR.qualified_name,
    user_id=placeholder("databaseUserId"),
    placeholders=(
        _SERVER_NAME,
        PlaceholderRecord("databaseName", "Name of the database.", example="clinical_trials"),
        _HOST_IDENTIFIER,
        _PORT_NUMBER,
        PlaceholderRecord("databaseUserId", "User identifier for the database connection."),
        _DESCRIPTION,
    ),
)
KAFKA_SERVER_TEMPLATE = TemplateRecord(
    kind=TemplateKind.SOFTWARE_SERVER,
    deployed_implementation_type=KAFKA_SERVER.name,
    resource_name=placeholder("serverName"),
    template_name="Apache Kafka Server Template",
    guid="761f2646-523c-4a19-816a-6c3a9a5cc91f",
    template_description="Create an Apache Kafka Server asset with its event broker capability, endpoint and connection.",
    network_address="~{hostIdentifier}~:~{portNumber}~",
    protocol="PLAINTEXT",
    connector_type=KAFKA_ADMIN_CONNECTOR.qualified_name,
    capability_type=KAFKA_BROKER.name,
    capability_name="Event Broker",
    placeholders=(_SERVER_NAME, _HOST_IDENTIFIER, _PORT_NUMBER, _DESCRIPTION),
)
KAFKA_TOPIC_TEMPLATE = TemplateRecord(
    kind=TemplateKind.DATA_SET,
    deployed_implementation_type=KAFKA_TOPIC.name,
    resource_name="~{serverName}~:~{topicName}~",
    template_name="Apache Kafka Topic Template",
    guid="5894e609-6346-41ea-aafa-f753ecb3aca5",
    template_description="Create a KafkaTopic asset.",
    extra_properties={"name": placeholder("topicName")},
    placeholders=(
        _SERVER_NAME,
        PlaceholderRecord("topicName", "Name of the topic.", example="orders"),
        _DESCRIPTION,
    ),
)
FILE_FOLDER_TEMPLATE = TemplateRecord(
    kind=TemplateKind.FOLDER,
    deployed_implementation_type=FILE_FOLDER.name,
    resource_name=placeholder("pathName"),
    template_name="File Folder Template",
    guid="723b57ae-e716-49a9-bb89-adeb385eda77",
    template_description="Create a FileFolder asset with a connection to the folder.",
    network_address=placeholder("pathName"),
    connector_type=BASIC_FOLDER_CONNECTOR.qualified_name,
    extra_properties={"pathName": placeholder("pathName")},
    placeholders=(_PATH_NAME, _DESCRIPTION),
)
CSV_FILE_TEMPLATE = TemplateRecord(
    kind=TemplateKind.FILE,
    deployed_implementation_type=CSV_FILE.name,
    resource_name=placeholder("pathName"),
    template_name="CSV Data File Template",
    guid="b6beb9a2-400b-498b-9342-f6f407f4f932",
    template_description="Create a CSVFile asset with a connection to the file.",
    network_address=placeholder("pathName"),
    connector_type=CSV_FILE_CONNECTOR.qualified_name,
    extra_properties={
        "pathName": placeholder("pathName"),
        "fileType": "CSV Data File",
        "fileExtension": "csv",
    },
    classifications=(
        ClassificationRecord("DataStoreEncoding", {"encoding": placeholder("fileEncoding")}),
    ),
    placeholders=(_PATH_NAME, _FILE_ENCODING, _DESCRIPTION),
)
REST_ENDPOINT_TEMPLATE = TemplateRecord(
    kind=TemplateKind.ENDPOINT,
    deployed_implementation_type=REST_ENDPOINT.name,
    resource_name=placeholder("networkAddress"),
    template_name="REST API Endpoint Template",
    guid="e3bb466c-33b5-43fb-a72e-88607b41ed9a",
    template_description="Create an Endpoint for a REST API.",
    network_address=placeholder("networkAddress"),
    protocol="HTTPS",
    placeholders=(
        PlaceholderRecord("networkAddress", "URL of the API.", example="https://localhost:9443/api"),
        _DESCRIPTION,
    ),
)

TEMPLATES = (
    POSTGRES_SERVER_TEMPLATE,
    POSTGRES_DATABASE_TEMPLATE,
    KAFKA_SERVER_TEMPLATE,
    KAFKA_TOPIC_TEMPLATE,
    FILE_FOLDER_TEMPLATE,
    CSV_FILE_TEMPLATE,
    REST_ENDPOINT_TEMPLATE,
)

# ── Integration connectors ───────────────────────────────────────

DEFAULT_INTEGRATION_GROUP = IntegrationGroupRecord(
    "Egeria:IntegrationGroup:DefaultOnboarding",
    "DefaultOnboarding",
    "Dynamic integration group to use with an Integration Daemon configuration.",
)


def _connector_qualified_name(connector_name: str) -> str:
    return f"{DEFAULT_INTEGRATION_GROUP.qualified_name}:{connector_name}"


FILES_CATALOGUER = IntegrationConnectorRecord(
    guid="675f7f0d-5082-4ef9-8494-3b7b3836e8dc",
    qualified_name=_connector_qualified_name("FilesCataloguer"),
    display_name="Files Cataloguer",
    description="Catalogs the files found in the sample-data directory.",
    connector_type=FILES_MONITOR_CONNECTOR.qualified_name,
    connector_name="FilesCataloguer",
    connector_user_id="filecatnpa",
    endpoint_address="sample-data",
    configuration_properties={"waitForDirectory": "true"},
    deployed_implementation_types=(FILE_FOLDER.name,),
)
JDBC_DATABASE_CATALOGUER = IntegrationConnectorRecord(
    guid="5da3073c-65e0-47d6-899f-133a7c55191c",
    qualified_name=_connector_qualified_name("JDBCDatabaseCataloguer"),
    display_name="JDBC Database Cataloguer",
    description="Catalogs the schemas, tables and columns of relational databases.",
    connector_type=JDBC_INTEGRATION_CONNECTOR.qualified_name,
    connector_name="JDBCDatabaseCataloguer",
    connector_user_id="dbcatnpa",
    deployed_implementation_types=(JDBC_DATABASE.name, POSTGRES_DATABASE.name),
)
POSTGRES_SERVER_CATALOGUER = IntegrationConnectorRecord(
    guid="20d92d8c-50b8-4704-81d0-cb5d787096c8",
    qualified_name=_connector_qualified_name("PostgreSQLServerCataloguer"),
    display_name="PostgreSQL Server Cataloguer",
    description="Catalogs the databases hosted by PostgreSQL servers.",
    connector_type=POSTGRES_SERVER_INTEGRATION_CONNECTOR.qualified_name,
    connector_name="PostgreSQLServerCataloguer",
    connector_user_id="postgrescatnpa",
    deployed_implementation_types=(POSTGRES_SERVER.name,),
)
KAFKA_CATALOGUER = IntegrationConnectorRecord(
    guid="9635d790-1cab-4062-ad22-234befe706bf",
    qualified_name=_connector_qualified_name("ApacheKafkaCataloguer"),
    display_name="Apache Kafka Cataloguer",
    description="Catalogs the topics of Apache Kafka servers.",
    connector_type=KAFKA_TOPIC_INTEGRATION_CONNECTOR.qualified_name,
    connector_name="ApacheKafkaCataloguer",
    connector_user_id="kafkacatnpa",
    deployed_implementation_types=(KAFKA_SERVER.name,),
)
OPENAPI_CATALOGUER = IntegrationConnectorRecord(
    guid="6d8ab1fd-3625-4b27-acc3-95e559e47cd1",
    qualified_name=_connector_qualified_name("OpenAPICataloguer"),
    display_name="OpenAPI Cataloguer",
    description="Catalogs the operations of REST APIs.",
    connector_type=OPENAPI_INTEGRATION_CONNECTOR.qualified_name,
    connector_name="OpenAPICataloguer",
    connector_user_id="apicatnpa",
    deployed_implementation_types=(REST_ENDPOINT.name,),
)

INTEGRATION_CONNECTORS = (
    FILES_CATALOGUER,
    JDBC_DATABASE_CATALOGUER,
    POSTGRES_SERVER_CATALOGUER,
    KAFKA_CATALOGUER,
    OPENAPI_CATALOGUER,
)

# ── Governance engines and services ──────────────────────────────

STEWARDSHIP_ENGINE = GovernanceEngineRecord(
    guid="ce5557d4-d8bc-48ae-b574-c73aa602e0c4",
    name="Egeria:GovernanceActionEngine:Stewardship",
    display_name="Stewardship Governance Action Engine",
    description="General stewardship actions.",
)
FILE_GOVERNANCE_ENGINE = GovernanceEngineRecord(
    guid="946b5e19-51ed-4d58-bcdb-63f27e2ec88e",
    name="Egeria:GovernanceActionEngine:FileGovernance",
    display_name="File Governance Action Engine",
    description="Provisions and watches files and folders.",
)
POSTGRES_GOVERNANCE_ENGINE = GovernanceEngineRecord(
    guid="767f30fd-ac46-4652-a0a7-cf00f1ed47b3",
    name="Egeria:GovernanceActionEngine:PostgreSQL",
    display_name="PostgreSQL Governance Action Engine",
    description="Creates and catalogs PostgreSQL servers and databases.",
)
POSTGRES_SURVEY_ENGINE = GovernanceEngineRecord(
    guid="4af293d5-d7e4-4102-8a16-69e2531f6c55",
    name="Egeria:SurveyActionEngine:PostgreSQL",
    display_name="PostgreSQL Survey Action Engine",
    description="Surveys the contents of PostgreSQL servers.",
    type_name="SurveyActionEngine",
)

GOVERNANCE_ENGINES = (
    STEWARDSHIP_ENGINE,
    FILE_GOVERNANCE_ENGINE,
    POSTGRES_GOVERNANCE_ENGINE,
    POSTGRES_SURVEY_ENGINE,
)

_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

WRITE_AUDIT_LOG_SERVICE = GovernanceServiceRecord(
    guid="ae5e8461-3f7c-4528-9156-06ffae7239e9",
    name="Egeria:GovernanceActionService:WriteAuditLog",
    display_name="Write Audit Log Governance Action Service",
    description="Writes the supplied message text to the audit log.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.stewardship.WriteAuditLogMessageGovernanceActionProvider",
    supported_request_parameters=("messageText",),
    produced_guards=("message-logged",),
)
DAY_OF_WEEK_SERVICE = GovernanceServiceRecord(
    guid="0bbe8b52-5dd9-4b1e-a23e-bfc564db11db",
    name="Egeria:GovernanceActionService:DayOfWeek",
    display_name="Day Of Week Governance Action Service",
    description="Produces a guard named after the current day of the week.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.stewardship.DaysOfWeekGovernanceActionProvider",
    produced_guards=tuple(day.lower() for day in _DAYS),
)
DEDUP_SERVICE = GovernanceServiceRecord(
    guid="adbdb485-1d12-4e27-beca-5673694d92eb",
    name="Egeria:GovernanceActionService:QualifiedNameDeduplication",
    display_name="Qualified Name Deduplication Governance Action Service",
    description="Detects elements that share a qualified name.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.stewardship.QualifiedNamePeerDuplicateGovernanceActionProvider",
    supported_action_targets=("newElement",),
    produced_guards=("duplicate-assigned", "no-duplicate"),
)
FILE_PROVISIONING_SERVICE = GovernanceServiceRecord(
    guid="c3c40fef-180d-45e4-a95e-8875eef08f3a",
    name="Egeria:GovernanceActionService:FileProvisioning",
    display_name="File Provisioning Governance Action Service",
    description="Copies, moves or deletes a file and records its lineage.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.provisioning.MoveCopyFileGovernanceActionProvider",
    supported_technologies=(SupportedTechnologyRecord(DATA_FILE.name), SupportedTechnologyRecord(FILE_FOLDER.name)),
    supported_request_parameters=("destinationFolder", "targetFileNamePattern"),
    supported_action_targets=("sourceFile", "destinationFolder"),
    produced_guards=("provisioning-complete", "provisioning-failed"),
)
NEW_FILES_WATCHDOG_SERVICE = GovernanceServiceRecord(
    guid="cf78a551-2894-4ef6-8ce1-1d8e06454a6b",
    name="Egeria:GovernanceActionService:NewFilesWatchdog",
    display_name="New Files Watchdog Governance Action Service",
    description="Starts a governance action when a new file appears in a folder.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.watchdog.GenericFolderWatchdogGovernanceActionProvider",
    type_name="WatchdogActionService",
    supported_technologies=(SupportedTechnologyRecord(FILE_FOLDER.name),),
    supported_action_targets=("folderTarget",),
    produced_guards=("monitoring-stopped", "monitoring-failed"),
)
CREATE_ASSET_SERVICE = GovernanceServiceRecord(
    guid="31385477-0b52-429a-a2ad-093534a83350",
    name="Egeria:GovernanceActionService:CreateAsset",
    display_name="Create Asset Governance Action Service",
    description="Creates an asset from a template.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.remediation.CreateAssetGovernanceActionProvider",
    supported_request_parameters=("templateGUID",),
    produced_guards=("asset-created", "asset-creation-failed"),
)
CATALOG_TARGET_SERVICE = GovernanceServiceRecord(
    guid="ef000247-00d6-401e-8432-afa3a47946cd",
    name="Egeria:GovernanceActionService:CatalogTarget",
    display_name="Catalog Target Governance Action Service",
    description="Adds the target asset to the catalog targets of an integration connector.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.governanceactions.remediation.CatalogTargetGovernanceActionProvider",
    supported_technologies=(SupportedTechnologyRecord(INTEGRATION_CONNECTOR.name),),
    supported_action_targets=("integrationConnector", "newAsset"),
    produced_guards=("catalog-target-added",),
)
POSTGRES_SURVEY_SERVICE = GovernanceServiceRecord(
    guid="2b2637b8-8ca7-4a0f-9bc2-4f8b88db763f",
    name="Egeria:SurveyActionService:PostgreSQLServer",
    display_name="PostgreSQL Server Survey Action Service",
    description="Surveys the databases of a PostgreSQL server.",
    connector_provider_class_name="org.odpi.openmetadata.adapters.connectors.postgres.survey.PostgresServerSurveyActionProvider",
    type_name="SurveyActionService",
    deployed_implementation_type=POSTGRES_SERVER.name,
    resource_use="Survey Resource",
    supported_technologies=(SupportedTechnologyRecord(POSTGRES_SERVER.name),),
    produced_guards=("survey-completed", "survey-failed"),
)

GOVERNANCE_SERVICES = (
    WRITE_AUDIT_LOG_SERVICE,
    DAY_OF_WEEK_SERVICE,
    DEDUP_SERVICE,
    FILE_PROVISIONING_SERVICE,
    NEW_FILES_WATCHDOG_SERVICE,
    CREATE_ASSET_SERVICE,
    CATALOG_TARGET_SERVICE,
    POSTGRES_SURVEY_SERVICE,
)

# ── Request types ────────────────────────────────────────────────

REQUEST_TYPES = (
    RequestTypeRecord(
        STEWARDSHIP_ENGINE.name,
        WRITE_AUDIT_LOG_SERVICE.name,
        "write-to-audit-log",
        "faa9ef71-3f49-4ab8-8241-066ef7b517e8",
    ),
    RequestTypeRecord(
        STEWARDSHIP_ENGINE.name,
        DAY_OF_WEEK_SERVICE.name,
        "get-day-of-week",
        "a3c16a82-a754-434f-930d-f412e62643a6",
    ),
    RequestTypeRecord(
        STEWARDSHIP_ENGINE.name,
        DEDUP_SERVICE.name,
        "qualified-name-dedup",
        "066e9a5f-b725-4047-abd8-ce5353803ba1",
    ),
    RequestTypeRecord(
        FILE_GOVERNANCE_ENGINE.name,
        NEW_FILES_WATCHDOG_SERVICE.name,
        "watch-for-new-files-in-folder",
        "69bead73-b5b7-4791-9293-c660990ec7bf",
        service_request_type="watch-nested-in-folder",
        supported_element_qualified_name=FILE_FOLDER.qualified_name,
    ),
    RequestTypeRecord(
        FILE_GOVERNANCE_ENGINE.name,
        FILE_PROVISIONING_SERVICE.name,
        "copy-file",
        "4f7c739b-69d3-4310-9bb2-507625dc2899",
        supported_element_qualified_name=DATA_FILE.qualified_name,
    ),
    RequestTypeRecord(
        FILE_GOVERNANCE_ENGINE.name,
        FILE_PROVISIONING_SERVICE.name,
        "move-file",
        "dc3ad63e-6663-4087-bcf3-6e48c68ed5b6",
        request_parameters={"noLineage": ""},
        supported_element_qualified_name=DATA_FILE.qualified_name,
    ),
    RequestTypeRecord(
        FILE_GOVERNANCE_ENGINE.name,
        FILE_PROVISIONING_SERVICE.name,
        "delete-file",
        "c658530b-5f99-4212-a321-92bad0cd9b60",
        supported_element_qualified_name=DATA_FILE.qualified_name,
    ),
    RequestTypeRecord(
        POSTGRES_GOVERNANCE_ENGINE.name,
        CREATE_ASSET_SERVICE.name,
        "create-postgres-server",
        "3facbdba-43c6-44b8-a222-ad0ad2c3c3d5",
        template=POSTGRES_SERVER_TEMPLATE.qualified_name,
        supported_element_qualified_name=POSTGRES_SERVER.qualified_name,
    ),
    RequestTypeRecord(
        POSTGRES_GOVERNANCE_ENGINE.name,
        CATALOG_TARGET_SERVICE.name,
        "catalog-postgres-server",
        "dab2303b-7bac-4985-b8eb-4a706e77d036",
        action_targets=(ActionTargetRecord("integrationConnector", POSTGRES_SERVER_CATALOGUER.qualified_name),),
        supported_element_qualified_name=POSTGRES_SERVER.qualified_name,
    ),
    RequestTypeRecord(
        POSTGRES_GOVERNANCE_ENGINE.name,
        CATALOG_TARGET_SERVICE.name,
        "catalog-postgres-database",
        "32ca425d-6aeb-40f0-bc7c-508a9689d24e",
        action_targets=(ActionTargetRecord("integrationConnector", JDBC_DATABASE_CATALOGUER.qualified_name),),
        supported_element_qualified_name=POSTGRES_DATABASE.qualified_name,
    ),
    RequestTypeRecord(
        POSTGRES_SURVEY_ENGINE.name,
        POSTGRES_SURVEY_SERVICE.name,
        "survey-postgres-server",
        "fcad7603-bd05-4d07-b6e8-a4fb29fd57fc",
        supported_element_qualified_name=POSTGRES_SERVER.qualified_name,
    ),
)

# ── Governance action processes ──────────────────────────────────

_DAILY_TASKS = ("Wash", "Iron", "Mend", "Market", "Clean", "Bake", "Rest")

DAILY_GOVERNANCE_ACTION_PROCESS = GovernanceProcessRecord(
    qualified_name="Egeria:DailyGovernanceActionProcess",
    display_name="DailyGovernanceActionProcess",
    description="Writes a different message to the audit log depending on the day of the week.",
    governance_engine=STEWARDSHIP_ENGINE.name,
    first_step="GetDayOfWeek",
    steps=(
        ProcessStepRecord(
            "GetDayOfWeek",
            "Get the day of the Week",
            request_type="get-day-of-week",
            transitions=tuple(ProcessTransitionRecord(day.lower(), f"{day}Task") for day in _DAYS),
        ),
        *(
            ProcessStepRecord(
                f"{day}Task",
                f"Output {day}'s task",
                request_type="write-to-audit-log",
                request_parameters={"messageText": f"Action For {day} is: {task}"},
            )
            for day, task in zip(_DAYS, _DAILY_TASKS)
        ),
    ),
)

CREATE_AND_CATALOG_POSTGRES_SERVER = GovernanceProcessRecord(
    qualified_name="Egeria:CreateAndCatalogPostgreSQLServer",
    display_name="Create and Catalog PostgreSQL Server",
    description="Creates a PostgreSQL server asset from its template and adds it to the server cataloguer.",
    governance_engine=POSTGRES_GOVERNANCE_ENGINE.name,
    first_step="CreateServer",
    steps=(
        ProcessStepRecord(
            "CreateServer",
            "Create the PostgreSQL Server asset",
            request_type="create-postgres-server",
            transitions=(ProcessTransitionRecord("asset-created", "CatalogServer", mandatory=True),),
        ),
        ProcessStepRecord(
            "CatalogServer",
            "Catalog the PostgreSQL Server",
            request_type="catalog-postgres-server",
        ),
    ),
)

GOVERNANCE_PROCESSES = (
    DAILY_GOVERNANCE_ACTION_PROCESS,
    CREATE_AND_CATALOG_POSTGRES_SERVER,
)


def builtin_catalogue() -> Catalogue:
    """The core content pack shipped with the package."""
    return Catalogue(
        archive=CORE_CONTENT_PACK,
        open_metadata_types=OPEN_METADATA_TYPES,
        enums=(RESOURCE_USE, CONFIDENTIALITY_LEVEL, BYTE_ORDERING, PROJECT_HEALTH),
        attribute_names=ATTRIBUTE_NAMES,
        valid_value_sets=VALID_VALUE_SETS,
        deployed_implementation_types=DEPLOYED_IMPLEMENTATION_TYPES,
        software_services=SOFTWARE_SERVICES,
        file_types=FILE_TYPES,
        file_names=FILE_NAMES,
        file_extensions=FILE_EXTENSIONS,
        connector_directory=CONNECTOR_DIRECTORY,
        connector_categories=(FILE_CONNECTOR_CATEGORY, KAFKA_CONNECTOR_CATEGORY, JDBC_CONNECTOR_CATEGORY),
        connector_types=CONNECTOR_TYPES,
        templates=TEMPLATES,
        integration_group=DEFAULT_INTEGRATION_GROUP,
        integration_connectors=INTEGRATION_CONNECTORS,
        governance_engines=GOVERNANCE_ENGINES,
        governance_services=GOVERNANCE_SERVICES,
        request_types=REQUEST_TYPES,
        governance_processes=GOVERNANCE_PROCESSES,
    )


__all__ = [
    "ArchiveMetadataRecord",
    "Catalogue",
    "CORE_CONTENT_PACK",
    "builtin_catalogue",
]
