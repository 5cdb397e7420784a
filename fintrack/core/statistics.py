from typing import List

import pandas as pd

from fintrack.common.models import Transaction, TransactionKind


def _round(value: float):
    value = round(float(value), 2)
    return int(value) if value.is_integer() else value


def compute_statistics(transactions: List[Transaction]) -> dict:
    """
    Aggregates stored transactions for the dashboard.

    Returns:
        Dict with balance, totalIncome, totalExpense, transactionCount and
        byCategory (per-category totals, expenses and income kept apart)
    """
    if not transactions:
        return {
            'balance': 0,
            'totalIncome': 0,
            'totalExpense': 0,
            'transactionCount': 0,
            'byCategory': [],
        }

    df = pd.DataFrame([
        {'type': t.kind.value, 'category': t.category, 'amount': float(t.amount)}
        for t in transactions
    ])

    totals = df.groupby('type')['amount'].sum()
    income = totals.get(TransactionKind.INCOME.value, 0.0)
    expense = totals.get(TransactionKind.EXPENSE.value, 0.0)

    by_category = (
        df.groupby(['type', 'category'], sort=True)['amount']
        .agg(['sum', 'count'])
        .reset_index()
        .sort_values(by=['type', 'sum'], ascending=[True, False])
    )

    return {
        'balance': _round(income - expense),
        'totalIncome': _round(income),
        'totalExpense': _round(expense),
        'transactionCount': len(df),
        'byCategory': [
            {
                'type': row['type'],
                'category': row['category'],
                'total': _round(row['sum']),
                'count': int(row['count']),
            }
            for _, row in by_category.iterrows()
        ],
    }
