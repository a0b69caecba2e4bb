"""Tests for the Device model."""

import pytest
from core.errors import ApiError, ConstructionError
from models.device import Device


class TestConstruction:
    """Test the two construction paths."""

    def test_from_id(self, client):
        device = Device.from_id(client, 5)
        assert device.id == 5

    @pytest.mark.parametrize("value", ["5", 5.0, None, True, {'id': 5}])
    def test_from_id_rejects_non_integers(self, client, value):
        with pytest.raises(ConstructionError, match="Device.from_id"):
            Device.from_id(client, value)

    def test_from_payload(self, client, signed_client):
        device = Device.from_payload(client, {'id': '5', 'name': 'Porch', 'statevalue': '128'})

        assert device.id == 5
        assert device.name == 'Porch'
        assert device.level == 50
        signed_client.get.assert_not_called()

    @pytest.mark.parametrize("value", [5, "5", [], {'name': 'no id'}])
    def test_from_payload_rejects_non_payloads(self, client, value):
        with pytest.raises(ConstructionError, match="Device.from_payload"):
            Device.from_payload(client, value)

    def test_str(self, client):
        device = Device.from_payload(client, {'id': 3, 'name': 'Bedroom'})
        assert str(device) == "3 Bedroom"


class TestLazyInfo:
    """Test info fetched on first access and memoized."""

    def test_info_fetched_once(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'id': '5', 'name': 'Porch', 'statevalue': '255'})
        device = Device.from_id(client, 5)

        assert device.name == 'Porch'
        assert device.level == 100
        assert device.name == 'Porch'

        signed_client.get.assert_called_once_with("/json/device/info?id=5")

    def test_info_error_propagates(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'error': 'Device not found'})
        device = Device.from_id(client, 99)

        with pytest.raises(ApiError):
            device.name


class TestSetLevel:
    """Test dimming writes."""

    def _device(self, client, statevalue='128'):
        return Device.from_payload(client, {'id': '5', 'name': 'Porch', 'statevalue': statevalue})

    def test_sends_wire_value(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'status': 'success'})
        device = self._device(client)

        device.level = 55

        signed_client.get.assert_called_once_with("/json/device/dim?id=5&level=140")
        assert device.level == 55

    def test_clamps_out_of_range(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'status': 'success'})
        device = self._device(client)

        device.level = 120
        signed_client.get.assert_called_with("/json/device/dim?id=5&level=255")

        device.level = -5
        signed_client.get.assert_called_with("/json/device/dim?id=5&level=0")

    def test_success_caches_requested_value(self, client, signed_client, make_response):
        """Cached level is the requested value, not one recomputed from the wire value."""
        signed_client.get.return_value = make_response({'status': 'success'})
        device = self._device(client)

        device.level = 120

        assert device.level == 120

    def test_repeated_increments_use_requested_values(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'status': 'success'})
        device = self._device(client)

        device.level += 1
        device.level += 1

        assert device.level == 52
        signed_client.get.assert_called_with("/json/device/dim?id=5&level=132")

    def test_failure_warns_and_keeps_level(self, client, signed_client, make_response, capsys):
        signed_client.get.return_value = make_response({'status': 'failed'})
        device = self._device(client)

        device.level = 80

        assert device.level == 50
        assert 'Level change on "5" did not succeed' in capsys.readouterr().out

    def test_missing_status_is_a_failure(self, client, signed_client, make_response, capsys):
        signed_client.get.return_value = make_response({})
        device = self._device(client)

        device.level = 80

        assert device.level == 50
        assert 'did not succeed' in capsys.readouterr().out

    def test_api_error_propagates(self, client, signed_client, make_response):
        signed_client.get.return_value = make_response({'error': 'Access denied'})
        device = self._device(client)

        with pytest.raises(ApiError):
            device.level = 80

    @pytest.mark.parametrize("payload", [[1], "ok", None])
    def test_non_object_response_is_a_failure(self, client, signed_client, make_response, payload, capsys):
        signed_client.get.return_value = make_response(payload)
        device = self._device(client)

        device.level = 80

        assert device.level == 50
        assert 'did not succeed' in capsys.readouterr().out
