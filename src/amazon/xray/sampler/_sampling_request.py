# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Dict
from urllib.parse import urlparse

from amazon.xray.sampler._matcher import cloud_platform_mapping
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes
from opentelemetry.semconv.trace import SpanAttributes
from opentelemetry.util.types import Attributes

# Keys of a sampling request, matched against a rule's Host, HTTPMethod, URLPath, ServiceName and ServiceType
HOST = "host"
HTTP_METHOD = "http_method"
URL_PATH = "url_path"
SERVICE = "service"
SERVICE_TYPE = "service_type"


def _build_sampling_request(resource: Resource, attributes: Attributes) -> Dict[str, str]:
    """Build the sampling request of a span from its attributes and the resource of its tracer.

    Keys that cannot be derived are left out; the rules treat them as empty strings.
    """
    sampling_request = {}

    if attributes is not None:
        host = _first_present(attributes, SpanAttributes.SERVER_ADDRESS, SpanAttributes.HTTP_HOST)
        if host is not None:
            sampling_request[HOST] = host

        http_method = _first_present(attributes, SpanAttributes.HTTP_REQUEST_METHOD, SpanAttributes.HTTP_METHOD)
        if http_method is not None:
            sampling_request[HTTP_METHOD] = http_method

        url_path = _get_url_path(attributes)
        if url_path is not None:
            sampling_request[URL_PATH] = url_path

    # Resource shouldn't be none as it should default to empty resource
    if resource is not None:
        service_name = resource.attributes.get(ResourceAttributes.SERVICE_NAME, None)
        if service_name is not None:
            sampling_request[SERVICE] = service_name

        cloud_platform = resource.attributes.get(ResourceAttributes.CLOUD_PLATFORM, None)
        service_type = cloud_platform_mapping.get(cloud_platform, None)
        if service_type is not None:
            sampling_request[SERVICE_TYPE] = service_type

    return sampling_request


def _get_url_path(attributes: Attributes):
    url_path = _first_present(attributes, SpanAttributes.URL_PATH, SpanAttributes.HTTP_TARGET)
    if url_path is not None:
        return url_path

    # target may be in url
    url_full = _first_present(attributes, SpanAttributes.URL_FULL, SpanAttributes.HTTP_URL)
    if url_full is None:
        return None

    # Per semantic conventions, url.full is always populated with scheme://host/target.
    # If scheme doesn't match, assume it's bad instrumentation and ignore.
    if url_full.find("://") == -1:
        return None

    # urlparse("scheme://netloc/path;parameters?query#fragment")
    url_path = urlparse(url_full).path
    if url_path == "":
        url_path = "/"
    return url_path


def _first_present(attributes: Attributes, *keys: str):
    for key in keys:
        value = attributes.get(key, None)
        if value is not None:
            return value
    return None
