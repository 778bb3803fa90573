import pandas as pd

from st2_read_gage_records import read_gage_records

def count_gages_by_year(gage_melt):
    '''
    Count distinct active sites per year.
    Returns one row per year present in the records (no zero fill).
    '''
    if gage_melt.empty:
        return pd.DataFrame({'year': pd.Series(dtype=int),
                             'n_sites': pd.Series(dtype=int)})

    gages_by_year = (
        gage_melt.groupby('year')['site']
        .nunique()
        .rename('n_sites')
        .reset_index()
        .sort_values('year')
        .reset_index(drop=True)
    )

    return gages_by_year


if __name__ == '__main__':
    import sys

    gages_by_year = count_gages_by_year(read_gage_records(sys.argv[1]))
    print(gages_by_year.to_string(index=False))
    print('Peak year:', gages_by_year.loc[gages_by_year['n_sites'].idxmax(), 'year'])
