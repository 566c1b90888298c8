"""Ready-made example inputs, one per supported source format."""

TYPESCRIPT_EXAMPLE = """interface User {
  id: string;
  email: string;
  name: string;
  age?: number;
  isActive: boolean;
  createdAt: Date;
  tags?: string[];
  profile?: {
    bio?: string;
    website?: string;
  };
}"""

JSON_EXAMPLE = """{
  "name": "User",
  "fields": [
    {
      "name": "id",
      "type": "string",
      "required": true,
      "unique": true
    }
  ]
}"""

MONGOOSE_EXAMPLE = """import { Schema, model } from 'mongoose';

const UserSchema = new Schema({
  email: { type: String, required: true, unique: true },
  name: { type: String, required: true, maxlength: 80 },
  age: { type: Number, min: 0 },
  tags: [{ type: String }],
  profile: {
    bio: { type: String },
    website: { type: String }
  }
});

export const User = model('User', UserSchema);"""

EXAMPLE_TEMPLATES = {
    "typescript": {
        "title": "TypeScript Interface",
        "format": "typescript",
        "content": TYPESCRIPT_EXAMPLE,
    },
    "schema": {
        "title": "JSON Schema",
        "format": "json",
        "content": JSON_EXAMPLE,
    },
    "mongoose": {
        "title": "Mongoose Model",
        "format": "mongoose",
        "content": MONGOOSE_EXAMPLE,
    },
}
