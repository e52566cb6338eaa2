from __future__ import annotations
from unittest.mock import patch
import pandas as pd
import pytest
from finnishgrid import datasets
from finnishgrid.catalog import load_catalog
from finnishgrid.clients.fingrid import FingridClient, MissingParameterError


class TestGeneratedFunctions:
    def test_one_function_per_entry(self):
        assert set(datasets.__all__) == set(load_catalog())
        for name in load_catalog():
            assert callable(getattr(datasets, name))

    def test_function_carries_dataset(self):
        assert datasets.electricity_consumption_FI.dataset.dataset_id == 124
        assert datasets.electricity_consumption_FI.__name__ == "electricity_consumption_FI"

    def test_delegates_to_fetch(self):
        with patch.object(FingridClient, "fetch") as mock_fetch:
            mock_fetch.return_value = pd.DataFrame()
            result = datasets.wind_power_hourly_data(
                "2021-01-01T00:00:00+0200", "2021-01-02T00:00:00+0200", user_key="key"
            )

        assert isinstance(result, pd.DataFrame)
        mock_fetch.assert_called_once_with(
            75, "2021-01-01T00:00:00+0200", "2021-01-02T00:00:00+0200", "key"
        )

    def test_missing_start_time(self, clean_env):
        with pytest.raises(MissingParameterError) as excinfo:
            datasets.electricity_consumption_FI()
        assert excinfo.value.field == "start time"
