"""Tests for deferred reference resolution."""

import unittest
from unittest.mock import Mock, call

from bbdoc.errors import DecodeError, ResourceUnavailable
from bbdoc.nodes import DeferredRef, ItemList, ItemListSpaced, Spoiler, StyledText
from bbdoc.rendering.codecs import CodecDecoder
from bbdoc.rendering.loaders import InMemoryLoader
from bbdoc.rendering.renderer import MarkupRenderer, render


class DeferredRefTest(unittest.TestCase):
    def setUp(self):
        self.loader = InMemoryLoader()
        self.loader.add("intro.txt", "Hello")
        self.loader.add("outro.txt", "Bye")
        self.loader.add("pair.json", '["intro.txt", "outro.txt"]')
        self.loader.add("top.json", '["pair.json", "pair.json"]')

    def test_reference_contributes_no_markup(self):
        out = render(DeferredRef("intro.txt", str), loader=self.loader)
        self.assertEqual(out, "Hello")

    def test_nested_references_resolve_all_levels(self):
        ref = DeferredRef.to(ItemList[DeferredRef[str]], "pair.json")
        self.assertEqual(render(ref, loader=self.loader), "Hello\nBye")

    def test_three_levels(self):
        ref = DeferredRef.to(
            ItemListSpaced[DeferredRef[ItemList[DeferredRef[str]]]], "top.json"
        )
        self.assertEqual(
            render(ref, loader=self.loader), "Hello\nBye\n\nHello\nBye"
        )

    def test_non_node_target_is_decode_error(self):
        self.loader.add("stats.json", '{"health": 50}')
        with self.assertRaises(DecodeError) as ctx:
            render(DeferredRef.to(dict, "stats.json"), loader=self.loader)
        self.assertEqual(ctx.exception.resource_name, "stats.json")
        self.assertIn("dict", str(ctx.exception))

    def test_reference_inside_composite(self):
        tree = Spoiler(
            ItemList([StyledText("Title"), DeferredRef("intro.txt", StyledText)])
        )
        self.assertEqual(
            render(tree, loader=self.loader), "[spoiler]Title\nHello[/spoiler]"
        )

    def test_loads_depth_first_left_to_right(self):
        loader = Mock(wraps=self.loader)
        ref = DeferredRef.to(ItemList[DeferredRef[str]], "pair.json")
        MarkupRenderer(loader=loader).render(ref)
        self.assertEqual(
            loader.load.call_args_list,
            [call("pair.json"), call("intro.txt"), call("outro.txt")],
        )

    def test_missing_resource_fails_whole_render(self):
        self.loader.add("broken.json", '["intro.txt", "nope.txt"]')
        ref = DeferredRef.to(ItemList[DeferredRef[str]], "broken.json")
        with self.assertRaises(ResourceUnavailable) as ctx:
            render(ref, loader=self.loader)
        self.assertEqual(ctx.exception.resource_name, "nope.txt")
        self.assertIn("ResourceUnavailable", str(ctx.exception))

    def test_shape_mismatch_raises_decode_error(self):
        self.loader.add("count.json", '{"not": "a list"}')
        ref = DeferredRef.to(ItemList[StyledText], "count.json")
        with self.assertRaises(DecodeError) as ctx:
            render(ref, loader=self.loader)
        self.assertEqual(ctx.exception.resource_name, "count.json")
        self.assertIn("count.json", str(ctx.exception))

    def test_empty_list_resource_is_decode_error(self):
        self.loader.add("empty.json", "[]")
        ref = DeferredRef.to(ItemList[StyledText], "empty.json")
        with self.assertRaises(DecodeError):
            render(ref, loader=self.loader)

    def test_custom_decoder_receives_target(self):
        decoder = Mock()
        decoder.decode.return_value = StyledText("decoded")
        out = MarkupRenderer(loader=self.loader, decoder=decoder).render(
            DeferredRef("intro.txt", StyledText)
        )
        self.assertEqual(out, "decoded")
        decoder.decode.assert_called_once_with("intro.txt", b"Hello", StyledText)

    def test_renders_are_identical(self):
        ref = DeferredRef.to(ItemList[DeferredRef[str]], "pair.json")
        self.assertEqual(
            render(ref, loader=self.loader), render(ref, loader=self.loader)
        )

    def test_logs_each_load(self):
        ref = DeferredRef.to(ItemList[DeferredRef[str]], "pair.json")
        with self.assertLogs("bbdoc.rendering.renderer", level="INFO") as logs:
            render(ref, loader=self.loader, decoder=CodecDecoder())
        self.assertEqual(
            [r.getMessage() for r in logs.records if r.levelname == "INFO"],
            ["Loading pair.json", "Loading intro.txt", "Loading outro.txt"],
        )


if __name__ == "__main__":
    unittest.main()
