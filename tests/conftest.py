import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp.web
import pytest

from kubeext import Client, ClientSettings, ConnectionInfo, Resource


def pytest_configure(config):
    # Warnings from the testing tools out of our control should not fail the tests.
    config.addinivalue_line('filterwarnings', 'ignore::DeprecationWarning:aresponses')


@pytest.fixture()
def namespaced_resource():
    """ The resource used in the tests. Usually mocked, so it does not matter. """
    return Resource('kubeext.dev', 'v1', 'kexamples', kind='KExample', namespaced=True)


@pytest.fixture()
def cluster_resource():
    """ The resource used in the tests. Usually mocked, so it does not matter. """
    return Resource('kubeext.dev', 'v1', 'kexamples', kind='KExample', namespaced=False)


@pytest.fixture(params=[True, False], ids=['namespaced', 'cluster'])
def resource(request):
    """ The resource used in the tests. Usually mocked, so it does not matter. """
    return Resource('kubeext.dev', 'v1', 'kexamples', kind='KExample', namespaced=request.param)


@pytest.fixture()
def namespace(resource):
    return 'ns' if resource.namespaced else None


@pytest.fixture()
def settings():
    return ClientSettings()


#
# Mocks for Kubernetes API. Reasons:
# 1. We do not test the HTTP client, we test the layers on top of it,
#    so everything low-level should be mocked and assumed to be functional.
# 2. No external calls must be made under any circumstances.
#    The unit-tests must be fully isolated from the environment.
#

@pytest.fixture()
def hostname():
    """ A fake hostname to be used in all aiohttp/aresponses tests. """
    return 'fake-host'


@pytest.fixture()
def default_namespace():
    return 'default-ns'


@pytest.fixture()
def connection_info(hostname, default_namespace):
    return ConnectionInfo(server=f'https://{hostname}', default_namespace=default_namespace)


@pytest.fixture()
async def client(connection_info, settings):
    async with Client(connection_info, settings=settings) as client:
        yield client


@pytest.fixture()
def resp_mocker(aresponses):
    """
    A factory of server-side callbacks for `aresponses` with mocking/spying.

    The value of the fixture is a function, which return a coroutine mock.
    That coroutine mock should be passed to `aresponses.add` as a response
    callback function. When called, it calls the mock defined by the function's
    arguments (specifically, return_value or side_effects).

    The difference from passing the responses directly to `aresponses.add`
    is that it is possible to assert on whether the response was handled
    by that callback at all (i.e. HTTP URL & method matched), especially
    if there are multiple responses registered.

    The request's payload is preserved in ``request['data']``,
    and the query parameters are available as usual in ``request.query``.

    Sample usage::

        def test_me(resp_mocker):
            response = aiohttp.web.json_response({'a': 'b'})
            callback = resp_mocker(return_value=response)
            aresponses.add(hostname, '/path/', 'get', callback)
            do_something()
            assert callback.called
            assert callback.call_count == 1
    """
    def resp_maker(*args, **kwargs):
        actual_response = MagicMock(*args, **kwargs)
        async def resp_mock_effect(request):
            nonlocal actual_response

            # The request's content can be read inside of the handler only. We preserve
            # the data into a conventional field, so that they could be asserted later.
            try:
                request['data'] = await request.json()
            except json.JSONDecodeError:
                request['data'] = await request.text()

            # Get a response/error as it was intended (via return_value/side_effect).
            response = actual_response()
            return response

        return AsyncMock(side_effect=resp_mock_effect)
    return resp_maker


@pytest.fixture()
def not_found_response():
    """ A factory of K8s-like 404 responses, with a ``Status`` payload. """
    def make_response(name='name1'):
        return aiohttp.web.json_response(status=404, data={
            'apiVersion': 'v1',
            'kind': 'Status',
            'status': 'Failure',
            'reason': 'NotFound',
            'code': 404,
            'message': f'"{name}" not found',
            'details': {'name': name},
        })
    return make_response
