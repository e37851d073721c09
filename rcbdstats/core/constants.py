"""
Label constants for rcbdstats.

This module is the SINGLE SOURCE OF TRUTH for the strings that appear in
result tables and interpretations. Import from here, never use raw strings.

Usage:
    from rcbdstats.core.constants import SOURCE_BLOCKS, SIGNIFICANT

    row = solution.row(SOURCE_BLOCKS)
    if row.significance == SIGNIFICANT:
        ...
"""

# ANOVA table sources, in table order
SOURCE_BLOCKS = 'Blocks'
SOURCE_TREATMENTS = 'Treatments'
SOURCE_INTERACTION = 'Interaction'
SOURCE_ERROR = 'Error'
SOURCE_TOTAL = 'Total'

# Sources that carry an F test
TESTED_SOURCES = (SOURCE_BLOCKS, SOURCE_TREATMENTS, SOURCE_INTERACTION)

ALL_SOURCES = (*TESTED_SOURCES, SOURCE_ERROR, SOURCE_TOTAL)

# Significance bands
SIGNIFICANT = 'significant'
MARGINAL = 'marginal'
NOT_SIGNIFICANT = 'not significant'

# Short codes printed next to p-values
SIGNIFICANCE_CODES = {
    SIGNIFICANT: '***',
    MARGINAL: '**',
    NOT_SIGNIFICANT: 'ns',
}

# Effect-size tiers
EFFECT_LARGE = 'large'
EFFECT_MEDIUM = 'medium'
EFFECT_SMALL = 'small'
EFFECT_NEGLIGIBLE = 'negligible'

# Partition keys
BY_BLOCK = 'block'
BY_TREATMENT = 'treatment'
BY_CELL = 'cell'

ALL_PARTITIONS = frozenset({BY_BLOCK, BY_TREATMENT, BY_CELL})

__all__ = [
    'SOURCE_BLOCKS',
    'SOURCE_TREATMENTS',
    'SOURCE_INTERACTION',
    'SOURCE_ERROR',
    'SOURCE_TOTAL',
    'TESTED_SOURCES',
    'ALL_SOURCES',
    'SIGNIFICANT',
    'MARGINAL',
    'NOT_SIGNIFICANT',
    'SIGNIFICANCE_CODES',
    'EFFECT_LARGE',
    'EFFECT_MEDIUM',
    'EFFECT_SMALL',
    'EFFECT_NEGLIGIBLE',
    'BY_BLOCK',
    'BY_TREATMENT',
    'BY_CELL',
    'ALL_PARTITIONS',
]
