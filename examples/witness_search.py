from boundary_search import High, Low, binary_search

# Every entry up to some point parsed, everything after it failed.
results = [("ok", "foo"), ("ok", "bar"), ("ok", "baz"), ("err", False), ("err", True)]

def classify(i):
    kind, payload = results[i]
    return Low(payload) if kind == "ok" else High(payload)

largest_low, smallest_high = binary_search((0, "foo"), (len(results) - 1, True), classify)

print(largest_low)    # Endpoint(index=2, witness='baz')
print(smallest_high)  # Endpoint(index=3, witness=False)
