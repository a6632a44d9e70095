"""
Tic-Tac-Toe Game Package

A generalized tic-tac-toe implementation on n x n boards.
"""

from .board import Board, Cell, MoveResult, Token, DEFAULT_DIMENSION, MAX_DIMENSION
from .game import GameController, GameState, MoveOutcome, MoveStatus, Player, RejectReason

__all__ = ['Board', 'Cell', 'MoveResult', 'Token', 'DEFAULT_DIMENSION', 'MAX_DIMENSION',
           'GameController', 'GameState', 'MoveOutcome', 'MoveStatus', 'Player', 'RejectReason']
__version__ = '1.0.0'
