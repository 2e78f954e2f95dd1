import dataclasses

import pytest

from kubeext import DeleteParams, ListParams, PatchParams, PostParams, delete_params, \
                    foreground_delete, list_params, patch_params_with_manager, \
                    post_params_with_manager


def test_delete_params_have_zero_grace_period():
    dp = delete_params()
    assert dp.grace_period_seconds == 0
    assert dp.propagation_policy is None
    assert not dp.dry_run


def test_delete_params_are_fresh_and_equal():
    assert delete_params() == delete_params()
    assert delete_params() is not delete_params()


def test_foreground_delete():
    dp = foreground_delete()
    assert dp.propagation_policy == 'Foreground'
    assert dp.grace_period_seconds is None


def test_list_params_are_unfiltered():
    lp = list_params()
    assert lp == ListParams()
    assert lp.as_query() == {}


def test_post_params_with_manager():
    pp = post_params_with_manager('my-controller')
    assert pp.field_manager == 'my-controller'
    assert not pp.dry_run
    assert pp.as_query() == {'fieldManager': 'my-controller'}


def test_patch_params_with_manager_forces_conflicts():
    pp = patch_params_with_manager('my-controller')
    assert pp.field_manager == 'my-controller'
    assert pp.force
    assert pp.as_query() == {'fieldManager': 'my-controller', 'force': 'true'}


def test_empty_manager_is_passed_through():
    assert post_params_with_manager('').as_query() == {'fieldManager': ''}
    assert patch_params_with_manager('').as_query() == {'fieldManager': '', 'force': 'true'}


def test_params_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        delete_params().grace_period_seconds = 10  # type: ignore


def test_list_params_builders_do_not_modify_the_original():
    lp1 = ListParams()
    lp2 = lp1.labels('app=x').fields('spec.nodeName=n1')
    assert lp1.label_selector is None
    assert lp2.label_selector == 'app=x'
    assert lp2.field_selector == 'spec.nodeName=n1'


@pytest.mark.parametrize('lp, expected', [
    (ListParams(), {}),
    (ListParams(label_selector=''), {}),
    (ListParams(label_selector='a=b'), {'labelSelector': 'a=b'}),
    (ListParams(field_selector='x=y'), {'fieldSelector': 'x=y'}),
    (ListParams(limit=0), {'limit': '0'}),
    (ListParams(limit=5, continue_token='tkn'), {'limit': '5', 'continue': 'tkn'}),
])
def test_list_params_query(lp, expected):
    assert lp.as_query() == expected


def test_post_params_dry_run():
    assert PostParams(dry_run=True).as_query() == {'dryRun': 'All'}


def test_patch_params_dry_run():
    assert PatchParams(dry_run=True).as_query() == {'dryRun': 'All'}


@pytest.mark.parametrize('dp, expected', [
    (DeleteParams(), {}),
    (DeleteParams(grace_period_seconds=0), {'gracePeriodSeconds': 0}),
    (DeleteParams(propagation_policy='Orphan'), {'propagationPolicy': 'Orphan'}),
    (DeleteParams(dry_run=True), {'dryRun': ['All']}),
])
def test_delete_options_body(dp, expected):
    assert dp.as_body() == {'apiVersion': 'v1', 'kind': 'DeleteOptions', **expected}


def test_delete_params_query():
    assert DeleteParams().as_query() == {}
    assert DeleteParams(dry_run=True).as_query() == {'dryRun': 'All'}
