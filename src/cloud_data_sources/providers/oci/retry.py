"""Retry policy handed to OCI SDK calls."""

import oci

from cloud_data_sources.config.schemas import RetryConfig


def build_retry_policy(retry_config: RetryConfig):
    """
    Build the OCI retry strategy for a request.

    Args:
        retry_config: Retry settings from configuration

    Returns:
        An OCI retry strategy; NoneRetryStrategy when retries are disabled
    """
    if not retry_config.enabled:
        return oci.retry.NoneRetryStrategy()

    return oci.retry.RetryStrategyBuilder(
        max_attempts_check=True,
        max_attempts=retry_config.max_attempts,
        total_elapsed_time_check=True,
        total_elapsed_time_seconds=retry_config.total_elapsed_time_seconds,
        retry_max_wait_between_calls_seconds=retry_config.max_wait_between_calls_seconds,
        retry_base_sleep_time_seconds=retry_config.base_sleep_time_seconds,
        service_error_check=True,
    ).get_retry_strategy()
