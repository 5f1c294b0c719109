import json
import unittest

from identity import Color
from packet_factory import PacketFactory
from packets import BasePacket, PacketError, parse_raw_packet, require_number
from packets.other import PlayerLeavePacket
from packets.player_join import InitPacket, PlayerJoinPacket
from packets.player_move import PositionPacket
from packets.world_update import BlockChangePacket, WorldStatePacket
from player_registry import PlayerRecord
from protocol import PacketType
from world_state import BlockChange


class TestPackets(unittest.TestCase):
    def test_parse_position(self):
        raw = {"type": PacketType.POSITION, "position": [1, 2, 3], "forward": [0, 0, -1], "pitch": 0.5}
        pkt = parse_raw_packet(raw)
        self.assertIsInstance(pkt, PositionPacket)
        self.assertEqual(pkt.position, (1.0, 2.0, 3.0))
        self.assertEqual(pkt.forward, (0.0, 0.0, -1.0))
        self.assertEqual(pkt.pitch, 0.5)

    def test_position_pitch_defaults_to_zero(self):
        for extra in ({}, {"pitch": None}, {"pitch": 0}):
            raw = {"type": "position", "position": [0, 0, 0], "forward": [1, 0, 0]}
            raw.update(extra)
            self.assertEqual(parse_raw_packet(raw).pitch, 0)

    def test_position_rejects_bad_vectors(self):
        bad = [
            {"type": "position", "forward": [0, 0, 1]},
            {"type": "position", "position": [0, 0], "forward": [0, 0, 1]},
            {"type": "position", "position": [0, "a", 0], "forward": [0, 0, 1]},
            {"type": "position", "position": [0, 0, 0], "forward": [0, True, 1]},
            {"type": "position", "position": [0, 0, 0], "forward": [0, 0, 1], "pitch": "up"},
        ]
        for raw in bad:
            with self.assertRaises(PacketError, msg=raw):
                parse_raw_packet(raw)

    def test_parse_block_change(self):
        pkt = parse_raw_packet({"type": "blockChange", "face": 2, "layer": 5.0, "block": {"kind": "stone"}})
        self.assertIsInstance(pkt, BlockChangePacket)
        self.assertEqual((pkt.face, pkt.layer), (2, 5))
        self.assertEqual(pkt.block, {"kind": "stone"})

    def test_block_change_requires_all_fields(self):
        with self.assertRaises(PacketError):
            parse_raw_packet({"type": "blockChange", "face": 2, "layer": 5})
        with self.assertRaises(PacketError):
            parse_raw_packet({"type": "blockChange", "face": 2.5, "layer": 5, "block": "dirt"})

    def test_block_may_be_null(self):
        pkt = parse_raw_packet({"type": "blockChange", "face": 0, "layer": 0, "block": None})
        self.assertIsNone(pkt.block)

    def test_parse_unknown_packet(self):
        self.assertIsNone(parse_raw_packet({"type": "dance", "foo": "bar"}))
        self.assertIsNone(parse_raw_packet({"foo": "bar"}))

    def test_parse_non_object(self):
        with self.assertRaises(PacketError):
            parse_raw_packet([1, 2, 3])

    def test_factory_parse_rejects_bad_json(self):
        with self.assertRaises(PacketError):
            PacketFactory.parse("{not json")
        with self.assertRaises(PacketError):
            PacketFactory.parse(b"\xff\xfe")

    def test_factory_parse_rejects_non_finite_numbers(self):
        for literal in ("NaN", "Infinity", "-Infinity", "1e400", "-1e400"):
            with self.subTest(literal=literal):
                with self.assertRaises(PacketError):
                    PacketFactory.parse('{"type":"position","position":[%s,0,0],"forward":[0,0,-1]}' % literal)

    def test_factory_parse_rejects_out_of_range_integers(self):
        # fits in an int, overflows a float
        with self.assertRaises(PacketError):
            PacketFactory.parse('{"type":"position","position":[1%s,0,0],"forward":[0,0,-1]}' % ("0" * 400))
        # more digits than MAX_INT_DIGITS
        with self.assertRaises(PacketError):
            PacketFactory.parse('{"type":"blockChange","face":1,"layer":2,"block":%s}' % ("9" * 5000))

    def test_factory_parse_rejects_deep_nesting(self):
        with self.assertRaises(PacketError):
            PacketFactory.parse("[" * 100000 + "]" * 100000)

    def test_require_number_rejects_huge_int(self):
        with self.assertRaises(PacketError):
            require_number(10 ** 400, "position")
        with self.assertRaises(PacketError):
            require_number(float("nan"), "position")

    def test_build_refuses_non_finite_numbers(self):
        with self.assertRaises(ValueError):
            PacketFactory.build(PlayerLeavePacket(id=float("inf")))

    def test_factory_parse_accepts_bytes(self):
        pkt = PacketFactory.parse(b'{"type":"blockChange","face":1,"layer":2,"block":"sand"}')
        self.assertEqual(pkt, BlockChangePacket(face=1, layer=2, block="sand"))


class TestOutboundPackets(unittest.TestCase):
    def setUp(self):
        self.player = PlayerRecord(id="p1", color=Color(0.5, 0.6, 0.7))

    def test_init_message(self):
        msg = json.loads(PacketFactory.build(InitPacket.for_player(self.player)))
        self.assertEqual(msg, {"type": "init", "id": "p1", "color": {"r": 0.5, "g": 0.6, "b": 0.7}})

    def test_player_join_message(self):
        msg = json.loads(PacketFactory.build(PlayerJoinPacket.for_player(self.player)))
        self.assertEqual(msg["type"], "playerJoin")
        self.assertEqual(msg["position"], [0, 102, 0])
        self.assertEqual(msg["forward"], [0, 0, -1])
        self.assertEqual(msg["pitch"], 0)

    def test_world_state_message(self):
        pkt = WorldStatePacket.for_changes([BlockChange(2, 5, "dirt"), BlockChange(0, 1, 7)])
        msg = json.loads(PacketFactory.build(pkt))
        self.assertEqual(msg, {
            "type": "worldState",
            "changes": [{"face": 2, "layer": 5, "block": "dirt"}, {"face": 0, "layer": 1, "block": 7}],
        })

    def test_build_is_compact(self):
        self.assertEqual(PacketFactory.build(PlayerLeavePacket(id="p1")), '{"type":"playerLeave","id":"p1"}')

    def test_base_packet_attribute_fallback(self):
        pkt = BasePacket(a=1)
        self.assertEqual(pkt.a, 1)
        with self.assertRaises(AttributeError):
            pkt.b


if __name__ == "__main__":
    unittest.main()
