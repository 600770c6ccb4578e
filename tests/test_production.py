"""Tests for ship construction and turn-start income."""

from galactic_wars.engine.production import grant_turn_income
from galactic_wars.models import ErrorType, ResourceLocation, Resources, Ship


def _territory(name, squares, bundle):
    return ResourceLocation(name, squares, resources=bundle, multi_square=True)


class TestBuildShip:
    """Test building ships."""

    def test_unknown_type(self, started_engine):
        outcome = started_engine.build_ship("Dreadnought")
        assert outcome.error_type == ErrorType.UNKNOWN_SHIP_TYPE
        assert "Dreadnought" in outcome.error

    def test_insufficient_materials(self, started_engine):
        outcome = started_engine.build_ship("Fighter")

        assert outcome.error_type == ErrorType.INSUFFICIENT_MATERIALS
        assert len(started_engine.game.players[0].ships) == 1

    def test_before_start_reports_materials(self, make_engine):
        engine = make_engine(players=("Alice", "Bob"))

        outcome = engine.build_ship("Fighter")

        assert outcome.error_type == ErrorType.INSUFFICIENT_MATERIALS
        assert outcome.error == "Not enough materials to build Fighter (have 0, need 5)."
        assert engine.game.players[0].ships[0].type == "Scout"
        assert len(engine.game.players[0].ships) == 1

    def test_requires_start_with_empty_roster(self, make_engine):
        assert make_engine().build_ship("Scout").error_type == ErrorType.NOT_STARTED

    def test_build_at_start_position(self, started_engine):
        started_engine.end_turn()
        bob = started_engine.game.players[1]
        bob.resources.materials = 12
        bob.ships[0].x, bob.ships[0].y = 10, 10

        outcome = started_engine.build_ship("Warrior")

        assert outcome.ok
        assert outcome.message == "Building Warrior (id=3)."
        assert bob.resources.materials == 5
        ship = bob.ships[-1]
        assert ship.type == "Warrior"
        assert (ship.x, ship.y) == (20, 20)
        assert ship.owner_id == 2
        assert ship.health == 3
        assert outcome.payload["ship"]["id"] == 3

    def test_exact_cost(self, started_engine):
        alice = started_engine.game.players[0]
        alice.resources.materials = 50

        assert started_engine.build_ship("TITAN").ok
        assert alice.resources.materials == 0


class TestTurnIncome:
    """Test territory income."""

    def test_occupying_any_square_pays_full_bundle(self, started_engine):
        game = started_engine.game
        game.resource_map = [_territory("Planet", [(9, 9), (9, 10), (10, 9)], Resources(5, 5, 5))]
        alice = game.players[0]
        alice.ships[0].x, alice.ships[0].y = 10, 9

        income = grant_turn_income(game, alice)

        assert income == Resources(5, 5, 5)
        assert alice.resources == Resources(5, 5, 5)

    def test_multiple_ships_on_one_territory_pay_once(self, started_engine):
        game = started_engine.game
        game.resource_map = [_territory("Planet", [(9, 9), (9, 10)], Resources(5, 5, 5))]
        alice = game.players[0]
        alice.ships[0].x, alice.ships[0].y = 9, 9
        alice.ships.append(Ship.spawn(game.allocate_ship_id(), "Fighter", 9, 10, alice.id))

        grant_turn_income(game, alice)

        assert alice.resources == Resources(5, 5, 5)

    def test_income_is_additive_across_territories(self, started_engine):
        game = started_engine.game
        game.resource_map = [
            _territory("Planet Alpha", [(9, 9)], Resources(5, 5, 5)),
            _territory("Earth 1", [(1, 1), (1, 2)], Resources(1, 1, 1)),
        ]
        alice = game.players[0]
        alice.ships.append(Ship.spawn(game.allocate_ship_id(), "Fighter", 9, 9, alice.id))

        grant_turn_income(game, alice)

        assert alice.resources == Resources(6, 6, 6)

    def test_no_income_without_occupation(self, started_engine):
        game = started_engine.game
        game.resource_map = [_territory("Planet", [(9, 9)], Resources(5, 5, 5))]

        income = grant_turn_income(game, game.players[0])

        assert income == Resources(0, 0, 0)
        assert game.players[0].resources == Resources(0, 0, 0)

    def test_shared_territory_pays_each_player(self, started_engine):
        game = started_engine.game
        game.resource_map = [_territory("Planet", [(9, 9), (12, 12)], Resources(5, 5, 5))]
        alice, bob = game.players
        alice.ships[0].x, alice.ships[0].y = 9, 9
        bob.ships[0].x, bob.ships[0].y = 12, 12

        grant_turn_income(game, alice)
        grant_turn_income(game, bob)

        assert alice.resources == Resources(5, 5, 5)
        assert bob.resources == Resources(5, 5, 5)

    def test_pickups_and_recruit_sites_pay_no_income(self, started_engine):
        game = started_engine.game
        game.resource_map = [
            ResourceLocation("Random Spot #1", [(1, 1)], resources=Resources(materials=2)),
            ResourceLocation("Lost Warrior 1", [(1, 1)], recruit_as="Warrior"),
        ]

        grant_turn_income(game, game.players[0])

        assert game.players[0].resources == Resources(0, 0, 0)
