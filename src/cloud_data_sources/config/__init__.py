from cloud_data_sources.config.manager import ConfigurationManager

__all__ = ["ConfigurationManager"]
