"""
Lexicographic enumeration walkthrough

Demonstrates:
- Combination generators over a sorted, duplicate-free domain
- Combinations with replacement and the power set
- Permutations ordered by input position, including repeated values
- Pulling results lazily and stopping early
- Index matrices for NumPy code
"""

from itertools import islice

import combinatorial as cb

# ============================================================================
# Combinations: input is sorted and deduplicated first
# ============================================================================

print("Pairs of {b, a, c, a}:")
for combo in cb.combinations_of_size(["b", "a", "c", "a"], 2):
    print("  ", combo)

print("\nPower set of {1, 2, 3} (size first, then lexicographic):")
for subset in cb.powerset([3, 2, 1]):
    print("  ", subset)

print("\nMultisets of size 2 over {x, y, z}:")
print("  ", list(cb.combinations_with_replacement_of_size("xyz", 2)))
print(f"   count = {cb.count_combinations_with_replacement(3, 2)}")

# ============================================================================
# Permutations: order follows input position, not value
# ============================================================================

print("\nPermutations of [Alice, Eve, Bob]:")
for perm in cb.permutations_full(["Alice", "Eve", "Bob"]):
    print("  ", perm)

print("\nRepeated values stay distinct by position:")
print("  ", list(cb.permutations_full([7, 7, 8])))

# ============================================================================
# Laziness: 12! results exist, only the first few are computed
# ============================================================================

print(f"\nFirst 3 of {cb.factorial(12):,} permutations of range(12):")
for perm in islice(cb.permutations_full(range(12)), 3):
    print("  ", perm)

# ============================================================================
# Index matrices
# ============================================================================

print("\n2-permutations of range(4) as an index matrix:")
print(cb.permutation_indices(4, 2))
