# Canned retailer payloads served by MemoryReviewSource, keyed by product id.
# (review_id, source, author, rating, title, body, created_at, verified_purchase)

SAMPLE_EXTERNAL_REVIEWS = {
    1: [  # USB-C Fast Charger 30W
        ("AMZ_0001", "Amazon", "John Smith", 5, "Excellent fast charger!",
         "This charger is amazing. Charges my phone super fast and the build quality is solid. Highly recommend!",
         "2025-09-15T10:30:00Z", True),
        ("AMZ_0002", "Amazon", "Emily Johnson", 4, "Good but runs warm",
         "Works well and charges quickly, but it does get noticeably warm during use. Not a dealbreaker though.",
         "2025-09-18T14:20:00Z", True),
        ("AMZ_0003", "Amazon", "Michael Brown", 5, "Perfect for travel",
         "Compact design, powerful charging. Perfect for my travel bag. Worth every penny.",
         "2025-09-22T08:45:00Z", True),
        ("AMZ_0004", "Amazon", "Sarah Davis", 3, "Decent charger",
         "It works fine, nothing special. Expected more for the price.",
         "2025-09-25T16:10:00Z", False),
        ("AMZ_0005", "Amazon", "David Wilson", 5, "Best charger I've owned",
         "Super fast charging, reliable, and the cable is high quality. This is my third purchase!",
         "2025-09-28T11:30:00Z", True),
        ("BB_0001", "BestBuy", "Jessica Martinez", 4, "Solid performer",
         "Good charging speed and build quality. Only downside is the price point.",
         "2025-09-16T13:00:00Z", True),
        ("BB_0002", "BestBuy", "Robert Taylor", 5, "Charges my laptop too!",
         "Not only charges my phone quickly, but also works great with my USB-C laptop. Very versatile.",
         "2025-09-20T09:15:00Z", True),
        ("BB_0003", "BestBuy", "Linda Anderson", 4, "Reliable and compact",
         "Does what it promises. Compact size is great for daily carry.",
         "2025-09-27T15:45:00Z", True),
        ("WM_0001", "Walmart", "Thomas Moore", 3, "Works but overpriced",
         "It charges fine, but I think you can find cheaper alternatives with similar performance.",
         "2025-09-17T10:20:00Z", True),
        ("WM_0002", "Walmart", "Karen White", 5, "Great value",
         "Fast charging, durable cable, and the price was better than other retailers. Very happy!",
         "2025-09-24T12:30:00Z", True),
        ("WM_0003", "Walmart", "James Harris", 4, "Good purchase",
         "Charges my devices quickly. No complaints so far.",
         "2025-09-29T17:00:00Z", False),
    ],
    2: [  # Wireless Bluetooth Headphones
        ("AMZ_0101", "Amazon", "Alex Thompson", 4, "Great sound quality",
         "Sound quality is impressive for the price. Battery life could be better though.",
         "2025-09-10T09:00:00Z", True),
        ("AMZ_0102", "Amazon", "Maria Garcia", 5, "Love these headphones!",
         "Comfortable, great sound, easy to pair. Best headphones I've tried in this price range.",
         "2025-09-14T14:30:00Z", True),
        ("AMZ_0103", "Amazon", "Chris Lee", 2, "Disappointed",
         "Connection keeps dropping. Sound is okay but not worth the hassle.",
         "2025-09-19T11:45:00Z", True),
        ("AMZ_0104", "Amazon", "Patricia King", 5, "Perfect for workouts",
         "Stay in place during exercise, sweat resistant, and great audio quality. Highly recommend!",
         "2025-09-26T16:20:00Z", True),
        ("BB_0101", "BestBuy", "Daniel Scott", 4, "Good but not great",
         "Sound quality is good, but the fit could be better. Still a decent purchase.",
         "2025-09-12T10:30:00Z", True),
        ("BB_0102", "BestBuy", "Jennifer Adams", 5, "Amazing value!",
         "Can't believe the quality for this price. Bass is punchy, highs are clear. Very impressed.",
         "2025-09-21T13:15:00Z", True),
        ("WM_0101", "Walmart", "William Turner", 3, "Average headphones",
         "They work fine for casual listening. Nothing special.",
         "2025-09-13T15:00:00Z", True),
        ("WM_0102", "Walmart", "Nancy Phillips", 4, "Comfortable and clear",
         "Very comfortable for long listening sessions. Sound is clear and balanced.",
         "2025-09-23T09:45:00Z", True),
    ],
    3: [  # Smart LED Light Bulb
        ("AMZ_0201", "Amazon", "Steven Clark", 5, "Easy setup, works perfectly",
         "Setup was a breeze. App is intuitive. Love being able to control lights from my phone!",
         "2025-09-08T12:00:00Z", True),
        ("AMZ_0202", "Amazon", "Barbara Rodriguez", 4, "Good smart bulb",
         "Works well with Alexa. Brightness levels are good. Only issue is occasional WiFi disconnection.",
         "2025-09-15T10:30:00Z", True),
        ("AMZ_0203", "Amazon", "Kevin Lewis", 3, "App needs improvement",
         "Bulb itself is fine, but the app is clunky and slow to respond.",
         "2025-09-22T14:15:00Z", False),
        ("BB_0201", "BestBuy", "Michelle Walker", 5, "Love the color options!",
         "So many color options! Great for setting the mood. Quality is excellent.",
         "2025-09-11T11:20:00Z", True),
        ("BB_0202", "BestBuy", "Brian Hall", 4, "Works as advertised",
         "Good brightness, easy to install, integrates well with smart home setup.",
         "2025-09-25T16:45:00Z", True),
        ("WM_0201", "Walmart", "Sandra Allen", 5, "Best smart bulb for the price",
         "Tried several brands, this one is the best value. Reliable and feature-rich.",
         "2025-09-18T13:30:00Z", True),
    ],
}

SAMPLE_FIELDS = ("review_id", "source", "author", "rating", "title", "body", "created_at", "verified_purchase")
