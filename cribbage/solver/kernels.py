"""
Numba-compiled scoring kernels for the discard solver.

Cards are passed as integer indices into DECK and looked up in the fixed
PIP_TABLE / ORDER_TABLE / SUIT_TABLE arrays. The kernels only compute totals;
``cribbage.game.scoring`` is the reference for the full breakdown and the two
must agree on every 5-card input.
"""

import numpy as np
from numba import jit

from cribbage.game.cards import DECK

PIP_TABLE = np.array([card.pip_value for card in DECK], dtype=np.int64)
ORDER_TABLE = np.array([card.order for card in DECK], dtype=np.int64)
SUIT_TABLE = np.array([card.suit.position for card in DECK], dtype=np.int64)

JACK_ORDER = 11
FIVE_ORDER = 5

# Per-order counts are packed 3 bits per order into one int64 (max count 5).
_COUNT_BITS = 3
_COUNT_MASK = 7


@jit(nopython=True, cache=True)
def score_five(pips, orders, suits, h0, h1, h2, h3, starter):
    """
    Total score of a 4-card hand plus starter.

    Args:
        pips: PIP_TABLE
        orders: ORDER_TABLE
        suits: SUIT_TABLE
        h0, h1, h2, h3: Hand card indices
        starter: Starter card index

    Returns:
        Total points (Fifteens + Pairs + Runs + Flush + His Nobs)
    """
    p0 = pips[h0]
    p1 = pips[h1]
    p2 = pips[h2]
    p3 = pips[h3]
    p4 = pips[starter]

    # Fifteens: every subset of size >= 2 (bit i selects card i)
    score = 0
    for mask in range(3, 32):
        if (mask & (mask - 1)) == 0:
            continue
        total = 0
        if mask & 1:
            total += p0
        if mask & 2:
            total += p1
        if mask & 4:
            total += p2
        if mask & 8:
            total += p3
        if mask & 16:
            total += p4
        if total == 15:
            score += 2

    packed = 0
    packed += 1 << (_COUNT_BITS * orders[h0])
    packed += 1 << (_COUNT_BITS * orders[h1])
    packed += 1 << (_COUNT_BITS * orders[h2])
    packed += 1 << (_COUNT_BITS * orders[h3])
    packed += 1 << (_COUNT_BITS * orders[starter])

    # Pairs
    for order in range(1, 14):
        count = (packed >> (_COUNT_BITS * order)) & _COUNT_MASK
        score += count * (count - 1)

    # Runs: only ranges of the best length score, ties add up
    best_length = 0
    run_points = 0
    order = 1
    while order <= 13:
        count = (packed >> (_COUNT_BITS * order)) & _COUNT_MASK
        if count == 0:
            order += 1
            continue
        end = order
        product = 1
        while end <= 13:
            count = (packed >> (_COUNT_BITS * end)) & _COUNT_MASK
            if count == 0:
                break
            product *= count
            end += 1
        length = end - order
        if length >= 3:
            if length > best_length:
                best_length = length
                run_points = length * product
            elif length == best_length:
                run_points += length * product
        order = end + 1
    score += run_points

    # Flush: hand cards only decide, starter adds the fifth point
    suit = suits[h0]
    if suits[h1] == suit and suits[h2] == suit and suits[h3] == suit:
        if suits[starter] == suit:
            score += 5
        else:
            score += 4

    # His Nobs
    starter_suit = suits[starter]
    if (
        (orders[h0] == JACK_ORDER and suits[h0] == starter_suit)
        or (orders[h1] == JACK_ORDER and suits[h1] == starter_suit)
        or (orders[h2] == JACK_ORDER and suits[h2] == starter_suit)
        or (orders[h3] == JACK_ORDER and suits[h3] == starter_suit)
    ):
        score += 1

    return score


@jit(nopython=True, cache=True)
def hand_scores(pips, orders, suits, k0, k1, k2, k3, pool):
    """
    Score a fixed keep against every starter in the pool.

    Returns:
        int64 array of totals, aligned with `pool`
    """
    n = pool.shape[0]
    scores = np.empty(n, dtype=np.int64)
    for i in range(n):
        scores[i] = score_five(pips, orders, suits, k0, k1, k2, k3, pool[i])
    return scores


@jit(nopython=True, cache=True)
def crib_totals(pips, orders, suits, d0, d1, pool, skip_fives_and_pairs):
    """
    Accumulate crib scores over every unseen pair and every remaining starter.

    The crib is our two discards plus an unordered pool pair {a, b}, scored
    against each pool card other than a and b as starter. When
    `skip_fives_and_pairs` is set, pairs containing a five or two cards of the
    same rank are left out.

    Returns:
        (sum of crib scores, number of crib/starter combinations)
    """
    n = pool.shape[0]
    total = 0
    count = 0
    for i in range(n):
        a = pool[i]
        for j in range(i + 1, n):
            b = pool[j]
            if skip_fives_and_pairs and (
                orders[a] == FIVE_ORDER or orders[b] == FIVE_ORDER or orders[a] == orders[b]
            ):
                continue
            for k in range(n):
                if k == i or k == j:
                    continue
                total += score_five(pips, orders, suits, d0, d1, a, b, pool[k])
                count += 1
    return total, count


def card_indices(cards) -> np.ndarray:
    """Convert cards to an int64 array of DECK indices."""
    return np.array([card.index for card in cards], dtype=np.int64)
