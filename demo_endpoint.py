"""
Quick demo script to try the schema catalogue endpoints.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Storefront Validation Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Schema list:   GET  http://localhost:8000/schemas?page=1&limit=10")
    print("   - Schema detail: GET  http://localhost:8000/schemas/createProduct")
    print("   - Dry run:       POST http://localhost:8000/schemas/createProduct/validate")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/schemas/addToCart/validate" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"productId": "507f1f77bcf86cd799439011", "quantity": 0}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
