"""
Pytest configuration and shared fixtures
"""

import pytest

from metro_planner.routes.fare_service import FareCalculationService
from metro_planner.routes.service import RouteService, build_network_graph
from metro_planner.stations.service import NetworkModel


def _station(station_id, name, time_to_next=0, distance_to_next=0.0,
             interchange_id=None, platforms=None):
    return {
        "id": station_id,
        "name": name,
        "interchange_id": interchange_id,
        "time_to_next": time_to_next,
        "distance_to_next": distance_to_next,
        "lat": 12.9,
        "lon": 77.5,
        "platforms": platforms,
    }


# red and blue meet at Bravo, blue and green at Foxtrot; grey is disconnected
SAMPLE_NETWORK = {
    "red": {
        "name": "Red Line",
        "color": "#E74C3C",
        "stations": [
            _station("R1", "Alpha", 120, 1.5),
            _station("R2", "Bravo", 180, 2.0, interchange_id="BRAVO",
                     platforms={"forward": 1, "backward": 2}),
            _station("R3", "Charlie"),
        ],
    },
    "blue": {
        "name": "Blue Line",
        "color": "#3498DB",
        "stations": [
            _station("B1", "Echo", 100, 1.2),
            _station("B2", "Bravo", 150, 2.5, interchange_id="BRAVO",
                     platforms={"forward": 3, "backward": 4}),
            _station("B3", "Foxtrot", 200, 3.0, interchange_id="FOXTROT"),
            _station("B4", "Golf"),
        ],
    },
    "green": {
        "name": "Green Line",
        "color": "#2ECC71",
        "stations": [
            _station("G1", "Hotel", 130, 1.1),
            _station("G2", "Foxtrot", 140, 1.8, interchange_id="FOXTROT",
                     platforms={"forward": 2, "backward": 1}),
            _station("G3", "India"),
        ],
    },
    "grey": {
        "name": "Grey Line",
        "color": "#95A5A6",
        "stations": [
            _station("Z1", "Juliet", 90, 1.0),
            _station("Z2", "Kilo"),
        ],
    },
}


@pytest.fixture
def sample_definition():
    """Raw line definitions for the synthetic test network"""
    return SAMPLE_NETWORK


@pytest.fixture
def sample_network():
    """NetworkModel built from the synthetic test network"""
    return NetworkModel.from_definition(SAMPLE_NETWORK)


@pytest.fixture
def sample_graph(sample_network):
    """Graph with the default five minute interchange walk"""
    return build_network_graph(sample_network, interchange_time_seconds=300)


@pytest.fixture
def route_service(sample_network, sample_graph):
    """RouteService over the synthetic network"""
    return RouteService(network=sample_network, graph=sample_graph)


@pytest.fixture
def fare_service():
    return FareCalculationService()
