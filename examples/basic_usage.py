"""
Basic usage example for RecordQuery.
"""

from datetime import date

from recordquery import Field, MappingRecord, RecordQuery, UnpopulatedFieldError

NAME = Field("name")
INDUSTRY = Field("industry")
REVENUE = Field("revenue")
SIGNED = Field("signed")
PHONE = Field("phone")

SCHEMA = ["name", "industry", "revenue", "signed", "phone"]


def main():
    print("=" * 60)
    print("RecordQuery Basic Usage Example")
    print("=" * 60)

    # 1. Wrap records
    print("\n1. Wrapping records...")
    rows = [
        {"name": "Acme", "industry": "Energy", "revenue": 1200, "signed": date(2021, 4, 1)},
        {"name": "Birch", "industry": "Retail", "revenue": 300, "signed": date(2023, 2, 9),
         "phone": "555-0101"},
        {"name": "Cobalt", "industry": "Mining", "revenue": 800, "signed": date(2019, 11, 30)},
        {"name": "Delta", "industry": "Energy", "revenue": 450, "signed": date(2024, 6, 12)},
    ]
    query = RecordQuery([MappingRecord(row, schema=SCHEMA) for row in rows])
    print(f"   Wrapped {len(rows)} records")

    # 2. Filter
    print("\n2. Filtering...")
    energy = query.filter().by_field(INDUSTRY).eq("Energy").get()
    print(f"   Energy accounts: {[r.data['name'] for r in energy]}")

    recent_or_big = (
        query.filter()
        .by_field(SIGNED).gte(date(2023, 1, 1))
        .or_else()
        .by_field(REVENUE).gt(1000)
        .get()
    )
    print(f"   Signed since 2023 or revenue > 1000: {[r.data['name'] for r in recent_or_big]}")

    first = query.filter().by_field(INDUSTRY).in_(["Mining", "Retail"]).get_first()
    print(f"   First Mining/Retail account: {first.data['name']}")

    # 3. Group
    print("\n3. Grouping...")
    groups = query.group().by_field(INDUSTRY).get()
    for key, bucket in groups.items():
        print(f"   {key.payload}: {[r.data['name'] for r in bucket]}")

    # 4. Reduce
    print("\n4. Reducing...")
    chain = query.filter().by_field(REVENUE).gte(400).then()
    print(f"   Revenue >= 400 sum: {chain.reduce().by_field(REVENUE).sum()}")
    print(f"   Revenue >= 400 average: {chain.reduce().by_field(REVENUE).average()}")

    # 5. Sparse fields
    print("\n5. Sparse fields...")
    try:
        query.filter().by_field(PHONE).is_not_null().get()
    except UnpopulatedFieldError as e:
        print(f"   Strict mode: {e}")

    with_phone = (
        query.filter()
        .ignore_non_populated_fields()
        .by_field(PHONE).is_not_null()
        .get()
    )
    print(f"   With phone: {[r.data['name'] for r in with_phone]}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)


if __name__ == "__main__":
    main()
