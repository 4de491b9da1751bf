from cloud_data_sources.providers.oci.client import OCIClient

__all__ = ["OCIClient"]
