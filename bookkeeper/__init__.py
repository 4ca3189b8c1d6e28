# NAC Bookkeeper
# Ledger & voucher accounting engine with Tally XML export
