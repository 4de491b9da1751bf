"""Cloud Data Sources - read cloud resources as declarative data sources.

Each data source turns its arguments into a vendor SDK request, pages through
the vendor list API, flattens every returned entity into a plain record and
applies the caller's filters before handing the result back as state.

Key Components:
    - datasource: paginator, record normalizer, filter engine and the
      collection/singular data source base classes
    - providers: OCI and AWS client wrappers and their data sources
    - provider: data source registry used by callers to run reads
    - config: dynaconf-backed configuration with pydantic schemas
    - cli: command-line interface

Usage:
    >>> cloud-data-sources list
    >>> cloud-data-sources read oci_database_databases --data '{"compartment_id": "ocid1...", "db_home_id": "ocid1..."}'
"""

__version__ = "0.1.0"
