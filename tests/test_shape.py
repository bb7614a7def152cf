import unittest

from feen.core import Piece, ShapeError
from feen.core.board import board_shape, dimension_count, is_rank
from feen.shape import freeze_board, validate_shape


K = Piece("K")
N = Piece("N")


class TestShapeValidator(unittest.TestCase):
    def test_rank_lengths_are_not_compared(self):
        self.assertEqual(validate_shape(((K,), (K, N), (None, None, None))), 2)

    def test_dimension_count(self):
        self.assertEqual(validate_shape((K, None)), 1)
        self.assertEqual(validate_shape((((K,),), ((N,),))), 3)

    def test_sibling_depth_mismatch(self):
        with self.assertRaises(ShapeError):
            validate_shape(((K,), ((K,),)))
        with self.assertRaises(ShapeError):
            validate_shape((((K,), (N,)), ((K,),), (K,)))

    def test_empty_and_mixed_nodes(self):
        for board in ((), ((K,), ()), ((K,), K), [[K], [None, []]]):
            with self.subTest(board=board):
                with self.assertRaises(ShapeError):
                    validate_shape(board)

    def test_non_board_objects(self):
        for board in ("K", 3, [1, 2], [[K], "x"]):
            with self.subTest(board=board):
                with self.assertRaises(TypeError):
                    validate_shape(board)

    def test_self_containing_board(self):
        board = [[K]]
        board.append(board)
        with self.assertRaises(ShapeError):
            validate_shape(board)

    def test_shared_subboards(self):
        rank = (K, None)
        layer = (rank, rank)
        self.assertEqual(validate_shape((layer, layer, layer)), 3)

    def test_freeze_board(self):
        frozen = freeze_board([[K, None], [N]])
        self.assertEqual(frozen, ((K, None), (N,)))
        self.assertIsInstance(frozen[0], tuple)
        with self.assertRaises(ShapeError):
            freeze_board([[K], [[N]]])


class TestBoardHelpers(unittest.TestCase):
    def test_board_shape(self):
        board = (((K, None, None), (None, None, N)), ((None,) * 3, (None,) * 3))
        self.assertEqual(board_shape(board), [2, 2, 3])
        self.assertEqual(dimension_count(board), 3)
        self.assertEqual(board_shape((K, None)), [2])

    def test_is_rank(self):
        self.assertTrue(is_rank((K, None)))
        self.assertFalse(is_rank(((K,),)))


if __name__ == "__main__":
    unittest.main()
