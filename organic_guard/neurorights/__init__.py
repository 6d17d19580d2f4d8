"""Non-derogable neurorights invariants, policy shards and the constitutional log."""