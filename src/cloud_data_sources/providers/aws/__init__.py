from cloud_data_sources.providers.aws.client import AWSClient

__all__ = ["AWSClient"]
