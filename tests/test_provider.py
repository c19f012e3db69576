import pytest

from tfguard.provider import Provider, rule_provider_to_string


def test_rule_provider_to_string_upper_cases():
    assert rule_provider_to_string(Provider.AWS) == "AWS"
    assert rule_provider_to_string("custom") == Provider.CUSTOM.value.upper()


@pytest.mark.parametrize(
    "provider, expected",
    [
        (Provider.AWS, "AWS"),
        (Provider.DIGITALOCEAN, "Digital Ocean"),
        (Provider.OPENSTACK, "OpenStack"),
        (Provider.CLOUDSTACK, "Cloudstack"),
    ],
)
def test_display_name_special_cases(provider, expected):
    assert provider.display_name() == expected


def test_display_name_title_cases_others():
    assert Provider.GITHUB.display_name() == "Github"
    assert Provider.GOOGLE.display_name() == "Google"


def test_const_name_removes_spaces():
    assert Provider.DIGITALOCEAN.const_name() == "DigitalOcean"
    for provider in Provider:
        assert " " not in provider.const_name()
        assert provider.const_name() == provider.display_name().replace(" ", "")


def test_provider_from_value_round_trip():
    for provider in Provider:
        assert Provider(provider.value) is provider


def test_unknown_provider_value_rejected():
    with pytest.raises(ValueError):
        Provider("no-such-cloud")