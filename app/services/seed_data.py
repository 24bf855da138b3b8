# Стартовые данные каталога для сида

INITIAL_DATA = {
    "products": [
        {
            "title": "Men's Chill Crew Neck Sweatshirt",
            "description": "Introducing the Tesla Chill Collection. The Men's Chill Crew Neck Sweatshirt has a premium, heavyweight exterior and soft fleece interior for comfort in any season.",
            "price": 75,
            "stock": 7,
            "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
            "slug": "mens_chill_crew_neck_sweatshirt",
            "gender": "men",
            "tags": ["sweatshirt"],
            "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        },
        {
            "title": "Men's Quilted Shirt Jacket",
            "description": "The Men's Quilted Shirt Jacket features a uniquely fit, quilted design for warmth and mobility in cold weather seasons.",
            "price": 200,
            "stock": 5,
            "sizes": ["XS", "S", "M", "XL", "XXL"],
            "slug": "men_quilted_shirt_jacket",
            "gender": "men",
            "tags": ["jacket"],
            "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
        },
        {
            "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
            "description": "Introducing the Tesla Raven Collection. The Men's Raven Lightweight Zip Up Bomber has a premium, modern silhouette made from a sustainable bamboo cotton blend.",
            "price": 130,
            "stock": 10,
            "sizes": ["S", "M", "L", "XL", "XXL"],
            "slug": "men_raven_lightweight_zip_up_bomber_jacket",
            "gender": "men",
            "tags": ["shirt"],
            "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
        },
        {
            "title": "Men's Turbine Long Sleeve Tee",
            "description": "Introducing the Tesla Turbine Collection. Designed for style, comfort and everyday lifestyle, the Men's Turbine Long Sleeve Tee features a subtle, water-based T logo on the left chest.",
            "price": 45,
            "stock": 50,
            "sizes": ["XS", "S", "M", "L"],
            "slug": "men_turbine_long_sleeve_tee",
            "gender": "men",
            "tags": ["shirt"],
            "images": ["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
        },
        {
            "title": "Men's Turbine Short Sleeve Tee",
            "description": "Introducing the Tesla Turbine Collection. Designed for style, comfort and everyday lifestyle, the Men's Turbine Short Sleeve Tee features a subtle, water-based Tesla wordmark across the chest.",
            "price": 40,
            "stock": 50,
            "sizes": ["M", "L", "XL", "XXL"],
            "slug": "men_turbine_short_sleeve_tee",
            "gender": "men",
            "tags": ["shirt"],
            "images": ["1741416-00-A_0_2000.jpg", "1741416-00-A_1.jpg"],
        },
        {
            "title": "Men's Cybertruck Owl Tee",
            "description": "Designed for comfort, the Cybertruck Owl Tee is made from 100% cotton and features our signature Cybertruck icon on the back.",
            "price": 35,
            "stock": 0,
            "sizes": ["M", "L", "XL", "XXL"],
            "slug": "men_cybertruck_owl_tee",
            "gender": "men",
            "tags": ["shirt"],
            "images": ["7654393-00-A_2_2000.jpg", "7654393-00-A_3.jpg"],
        },
        {
            "title": "Men's Solar Roof Tee",
            "description": "Inspired by our fully integrated home solar and storage system, the Tesla Solar Roof Tee advocates for clean, sustainable energy wherever you go.",
            "price": 35,
            "stock": 15,
            "sizes": ["S", "M", "L", "XL"],
            "slug": "men_solar_roof_tee",
            "gender": "men",
            "tags": ["shirt"],
            "images": ["1703767-00-A_0_2000.jpg", "1703767-00-A_1.jpg"],
        },
        {
            "title": "Kids Cybertruck Long Sleeve Tee",
            "description": "Designed for fit, comfort and style, the Tesla Kids Cybertruck Long Sleeve Tee features the Cybertruck graffiti wordmark on the front.",
            "price": 30,
            "stock": 10,
            "sizes": ["XS", "S", "M"],
            "slug": "kids_cybertruck_long_sleeve_tee",
            "gender": "kid",
            "tags": ["shirt"],
            "images": ["1742693-00-A_0_2000.jpg", "1742693-00-A_1.jpg"],
        },
        {
            "title": "Kids Scribble T Logo Tee",
            "description": "The Kids Scribble T Logo Tee is made from 100% Peruvian cotton and features a Tesla T sketched logo for every young artist to wear.",
            "price": 25,
            "stock": 0,
            "sizes": ["XS", "S", "M"],
            "slug": "kids_scribble_t_logo_tee",
            "gender": "kid",
            "tags": ["shirt"],
            "images": ["8529312-00-A_0_2000.jpg", "8529312-00-A_1.jpg"],
        },
        {
            "title": "Women's Cropped Puffer Jacket",
            "description": "The Women's Cropped Puffer Jacket features a uniquely cropped silhouette for the perfect, modern style while on the go during the cozy season ahead.",
            "price": 225,
            "stock": 85,
            "sizes": ["XS", "S", "M"],
            "slug": "women_cropped_puffer_jacket",
            "gender": "women",
            "tags": ["hoodie"],
            "images": ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
        },
        {
            "title": "Women's Chill Half Zip Cropped Hoodie",
            "description": "Introducing the Tesla Chill Collection. The Women's Chill Half Zip Cropped Hoodie has a premium, soft fleece exterior and cropped silhouette for comfort in everyday lifestyle.",
            "price": 130,
            "stock": 10,
            "sizes": ["XS", "S", "M", "XXL"],
            "slug": "women_chill_half_zip_cropped_hoodie",
            "gender": "women",
            "tags": ["hoodie"],
            "images": ["1740226-00-A_0_2000.jpg", "1740226-00-A_1.jpg"],
        },
        {
            "title": "Women's Raven Slouchy Crew Sweatshirt",
            "description": "Introducing the Tesla Raven Collection. The Women's Raven Slouchy Crew Sweatshirt has a premium, relaxed silhouette made from a sustainable bamboo cotton blend.",
            "price": 110,
            "stock": 9,
            "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
            "slug": "women_raven_slouchy_crew_sweatshirt",
            "gender": "women",
            "tags": ["hoodie"],
            "images": ["1740260-00-A_0_2000.jpg", "1740260-00-A_1.jpg"],
        },
    ]
}
